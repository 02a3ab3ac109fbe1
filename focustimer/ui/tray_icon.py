"""
System Tray Application - Main UI entry point.

Architecture Decision: Presentation Layer
This layer only wires things together and reflects engine state in the tray.
All timing and record keeping is delegated to the services. The process owns
exactly one CycleRepository, created here and injected downwards.
"""

import logging
import sys
from typing import Optional

from PySide6.QtGui import QAction, QColor, QIcon, QPixmap
from PySide6.QtWidgets import QApplication, QMenu, QSystemTrayIcon

from focustimer.domain.models import Phase
from focustimer.i18n import on_language_changed, tr
from focustimer.infra.activity import create_activity_sampler
from focustimer.infra.config import AppSettings, get_settings
from focustimer.infra.repository import CycleRepository
from focustimer.services import CycleRecorder, CycleWriter, PomodoroEngine
from focustimer.services.notifier import LogNotifier, TrayNotifier

logger = logging.getLogger(__name__)

PHASE_COLORS = {
    Phase.IDLE: "gray",
    Phase.WORKING: "firebrick",
    Phase.SHORT_BREAK: "seagreen",
    Phase.LONG_BREAK: "royalblue",
}


class SystemTrayApp:
    """
    Main application class managing the system tray icon and coordination.
    """

    WRITER_SHUTDOWN_TIMEOUT_MS = 5000

    def __init__(self, settings: Optional[AppSettings] = None):
        self.app = QApplication(sys.argv)
        self.app.setQuitOnLastWindowClosed(False)  # Tray only, no windows

        self.settings = settings or get_settings()

        # Persistence
        self.repository = CycleRepository(self.settings.data_dir)
        self.user_settings = self.repository.load_settings()
        self.writer = CycleWriter(self.repository)

        # Tray and alerts
        self.tray_icon = QSystemTrayIcon(self._create_icon(Phase.IDLE), self.app)
        if QSystemTrayIcon.isSystemTrayAvailable():
            notifier = TrayNotifier(self.tray_icon, self.user_settings.sound_enabled)
        else:
            logger.warning("No system tray available; alerts go to the log")
            notifier = LogNotifier()

        # Services
        self.engine = PomodoroEngine(
            settings=self.user_settings,
            intervals_before_long_break=self.settings.intervals_before_long_break,
            notifier=notifier,
        )
        self.sampler = None
        if self.settings.activity_tracking_enabled:
            self.sampler = create_activity_sampler(self.settings.sample_interval_seconds)
        self.recorder = CycleRecorder(
            self.engine, self.writer,
            sampler=self.sampler,
            track_breaks=self.settings.track_breaks,
        )

        self._connect_signals()

        # Setup UI
        self.setup_menu()
        self.tray_icon.activated.connect(self._on_tray_icon_activated)
        self._update_status()
        self.tray_icon.show()
        on_language_changed(lambda _lang: self.setup_menu())

    def _create_icon(self, phase: Phase) -> QIcon:
        """Plain colored square, one color per phase"""
        pixmap = QPixmap(16, 16)
        pixmap.fill(QColor(PHASE_COLORS[phase]))
        return QIcon(pixmap)

    def _connect_signals(self):
        """Connect engine signals to tray updates"""
        self.engine.remaining_changed.connect(self._on_remaining_changed)
        self.engine.phase_entered.connect(self._on_phase_changed)
        self.engine.phase_exited.connect(self._on_phase_changed)
        self.engine.cycle_completed.connect(lambda _event: self._update_status())

    def setup_menu(self):
        """(Re)build the tray context menu"""
        menu = QMenu()

        self.status_action = QAction(self._status_text(), menu)
        self.status_action.setEnabled(False)
        menu.addAction(self.status_action)
        menu.addSeparator()

        self.toggle_action = QAction(menu)
        self.toggle_action.triggered.connect(self._toggle_session)
        menu.addAction(self.toggle_action)
        menu.addSeparator()

        quit_action = QAction(tr("tray.quit"), menu)
        quit_action.triggered.connect(self._quit_application)
        menu.addAction(quit_action)

        self.menu = menu
        self.tray_icon.setContextMenu(menu)
        self._update_status()

    def _status_text(self) -> str:
        return tr(
            "tray.status",
            phase=tr(f"phase.{self.engine.phase.value}"),
            count=self.engine.completed_work_intervals,
        )

    def _update_status(self):
        running = self.engine.is_running()
        self.toggle_action.setText(tr("tray.stop_session") if running else tr("tray.start_session"))
        self.status_action.setText(self._status_text())
        self.tray_icon.setIcon(self._create_icon(self.engine.phase))
        self.tray_icon.setToolTip(f"{self._status_text()} - {self.engine.format_remaining()}")

    def _on_remaining_changed(self, formatted: str, _seconds: float):
        self.tray_icon.setToolTip(f"{self._status_text()} - {formatted}")

    def _on_phase_changed(self, _event):
        # Exit and enter arrive back to back; the later call wins
        self._update_status()

    def _toggle_session(self):
        if self.engine.is_running():
            self.engine.stop()
        else:
            self.engine.apply_settings(self.repository.load_settings())
            self.engine.start_work_session()

    def _on_tray_icon_activated(self, reason):
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            self._toggle_session()

    def _quit_application(self):
        """Stop the session, flush pending writes and exit"""
        self.engine.stop()
        self.recorder.flush()
        if not self.writer.wait_for_done(self.WRITER_SHUTDOWN_TIMEOUT_MS):
            logger.error("Pending cycle writes did not finish before exit")
        self.tray_icon.hide()
        self.app.quit()

    def run(self) -> int:
        """Run the Qt event loop"""
        logger.info("Storing cycles in %s", self.repository.cycles_dir)
        return self.app.exec()
