# -*- coding: utf-8 -*-
"""
Translation dictionaries for German and English.

This module contains all translatable strings for the Focus Timer application.
"""

TRANSLATIONS = {
    "en": {
        # Application
        "app.name": "Focus Timer",
        "app.ready": "Focus Timer Ready",

        # Tray menu
        "tray.start_session": "Start Session",
        "tray.stop_session": "Stop Session",
        "tray.quit": "Quit",
        "tray.status": "Status: {phase} ({count} Pomos)",

        # Phases
        "phase.idle": "Idle",
        "phase.working": "Working",
        "phase.shortBreak": "Short Break",
        "phase.longBreak": "Long Break",

        # Alerts
        "break.short": "short",
        "break.long": "long",
        "alert.work_complete.title": "Work Interval Complete!",
        "alert.work_complete.body": "Time for a {kind} break.",
        "alert.break_over.title": "Break Over!",
        "alert.break_over.body": "Time to get back to work.",

        # Report
        "report.title": "Focus report for {day}",
        "report.completed": "Completed work intervals: {count}",
        "report.interrupted": "Interrupted work intervals: {count}",
        "report.focus_time": "Focus time: {duration}",
        "report.break_time": "Break time: {duration}",
        "report.top_apps": "Most used applications:",
        "report.no_data": "No cycles recorded.",
    },
    "de": {
        # Application
        "app.name": "Fokus-Timer",
        "app.ready": "Fokus-Timer bereit",

        # Tray menu
        "tray.start_session": "Sitzung starten",
        "tray.stop_session": "Sitzung beenden",
        "tray.quit": "Beenden",
        "tray.status": "Status: {phase} ({count} Pomodoros)",

        # Phases
        "phase.idle": "Inaktiv",
        "phase.working": "Arbeit",
        "phase.shortBreak": "Kurze Pause",
        "phase.longBreak": "Lange Pause",

        # Alerts
        "break.short": "kurze",
        "break.long": "lange",
        "alert.work_complete.title": "Arbeitsintervall abgeschlossen!",
        "alert.work_complete.body": "Zeit für eine {kind} Pause.",
        "alert.break_over.title": "Pause vorbei!",
        "alert.break_over.body": "Zurück an die Arbeit.",

        # Report
        "report.title": "Fokusbericht für {day}",
        "report.completed": "Abgeschlossene Arbeitsintervalle: {count}",
        "report.interrupted": "Abgebrochene Arbeitsintervalle: {count}",
        "report.focus_time": "Fokuszeit: {duration}",
        "report.break_time": "Pausenzeit: {duration}",
        "report.top_apps": "Meistgenutzte Anwendungen:",
        "report.no_data": "Keine Zyklen aufgezeichnet.",
    },
}
