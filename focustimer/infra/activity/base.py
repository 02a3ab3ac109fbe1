"""
Base class for foreground-application sampling.

Architecture Decision: Observer Pattern + Factory Pattern
Defines the interface platform-specific implementations must follow. The
sampler only knows how to ask the OS which application is in front; when to
sample is decided by the cycle recorder through enable()/disable().
"""

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from focustimer.services.clock import SystemClock

logger = logging.getLogger(__name__)


class ActivitySampler(QObject):
    """
    Periodically reports the name of the foreground application.

    Best effort: sampling runs on the Qt event loop and may drift.
    Platform-specific implementations override get_active_app_name().
    """

    # Signals
    sampled = Signal(str, object)  # (app_name, datetime)

    UNKNOWN_APP = "Unknown"
    NOT_SAMPLING = "N/A"

    def __init__(self, interval_seconds: float = 10.0, clock=None):
        super().__init__()
        if interval_seconds <= 0:
            raise ValueError("Sampling interval must be positive")
        self.clock = clock or SystemClock()
        self._interval_seconds = float(interval_seconds)
        self._enabled = False
        self.last_app_name = self.NOT_SAMPLING

        self._timer = QTimer(self)
        self._timer.setInterval(int(self._interval_seconds * 1000))
        self._timer.timeout.connect(self.sample_now)

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self):
        """Start sampling: one sample right away, then one per interval"""
        self._timer.stop()
        self._enabled = True
        self._timer.start()
        self.sample_now()

    def disable(self):
        """Stop sampling"""
        self._timer.stop()
        self._enabled = False
        self.last_app_name = self.NOT_SAMPLING

    def sample_now(self):
        """Take a single sample and emit it"""
        try:
            app_name = self.get_active_app_name() or self.UNKNOWN_APP
        except Exception:
            logger.exception("Failed to query the foreground application")
            app_name = self.UNKNOWN_APP

        self.last_app_name = app_name
        self.sampled.emit(app_name, self.clock.now())

    def get_active_app_name(self) -> str:
        """Return the foreground application's name"""
        raise NotImplementedError("Subclasses must implement get_active_app_name")
