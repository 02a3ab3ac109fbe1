"""
Alert sinks for phase-boundary notifications.

Delivery is fire-and-forget. The engine catches and logs anything a sink
raises, so a broken sink can never stall the timer.
"""

import logging

from PySide6.QtWidgets import QApplication, QSystemTrayIcon

logger = logging.getLogger(__name__)


class LogNotifier:
    """Writes alerts to the log. Used when no tray is available."""

    def notify(self, title: str, body: str) -> None:
        logger.info("%s - %s", title, body)


class TrayNotifier:
    """Shows alerts as system tray balloon messages"""

    MESSAGE_TIMEOUT_MS = 5000

    def __init__(self, tray_icon: QSystemTrayIcon, sound_enabled: bool = True):
        self.tray_icon = tray_icon
        self.sound_enabled = sound_enabled

    def notify(self, title: str, body: str) -> None:
        if not QSystemTrayIcon.supportsMessages():
            logger.warning("System tray messages unsupported; alert %r not shown", title)
            return

        self.tray_icon.showMessage(
            title, body, QSystemTrayIcon.MessageIcon.Information, self.MESSAGE_TIMEOUT_MS
        )
        if self.sound_enabled:
            QApplication.beep()
