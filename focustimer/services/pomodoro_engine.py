"""
Pomodoro Engine - Session state machine.

Architecture Decision: Observer Pattern (Qt Signals)
The engine owns the session state and emits typed transition events. The
cycle recorder, the tray UI and anything else interested subscribe to the
signals; the engine knows nothing about them.

Phases: IDLE -> WORKING -> SHORT_BREAK | LONG_BREAK -> WORKING -> ...
A phase ends either by natural expiry (tick() sees the countdown reach zero)
or by stop().
"""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from focustimer.domain.events import CycleCompleted, PhaseEntered, PhaseExited
from focustimer.domain.models import Phase, UserSettings
from focustimer.i18n import tr
from focustimer.services.clock import SystemClock

logger = logging.getLogger(__name__)


class PomodoroEngine(QObject):
    """
    The Pomodoro timer. Manages session state but knows nothing about the UI.

    Configured durations may change at any time; the new values only apply
    the next time the corresponding phase is entered.
    """

    # Signals
    phase_entered = Signal(object)  # PhaseEntered
    phase_exited = Signal(object)  # PhaseExited
    cycle_completed = Signal(object)  # CycleCompleted
    remaining_changed = Signal(str, float)  # (formatted "MM:SS", seconds)

    TICK_INTERVAL_MS = 1000

    def __init__(self, settings: Optional[UserSettings] = None,
                 intervals_before_long_break: int = 4,
                 notifier=None, clock=None):
        super().__init__()
        settings = settings or UserSettings()
        if intervals_before_long_break <= 0:
            raise ValueError("intervals_before_long_break must be positive")

        self.clock = clock or SystemClock()
        self.notifier = notifier

        self._work_duration = settings.work_duration_seconds
        self._short_break_duration = settings.short_break_seconds
        self._long_break_duration = settings.long_break_seconds
        self._intervals_before_long_break = intervals_before_long_break

        self._phase = Phase.IDLE
        self._remaining: float = self._work_duration
        self._completed_work_intervals: int = 0
        self._current_configured_duration: float = self._work_duration
        self._target_time: Optional[float] = None  # monotonic deadline

        # Internal timer that fires every second while a phase runs
        self._timer = QTimer(self)
        self._timer.setInterval(self.TICK_INTERVAL_MS)
        self._timer.timeout.connect(self.tick)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining(self) -> float:
        """Seconds left in the current phase (work duration while idle)"""
        return self._remaining

    @property
    def completed_work_intervals(self) -> int:
        return self._completed_work_intervals

    @property
    def current_configured_duration(self) -> float:
        """Duration the running phase was started with"""
        return self._current_configured_duration

    @property
    def intervals_before_long_break(self) -> int:
        return self._intervals_before_long_break

    @intervals_before_long_break.setter
    def intervals_before_long_break(self, value: int):
        if value <= 0:
            raise ValueError("intervals_before_long_break must be positive")
        self._intervals_before_long_break = value

    @property
    def work_duration(self) -> float:
        return self._work_duration

    @work_duration.setter
    def work_duration(self, seconds: float):
        self._work_duration = self._check_duration(seconds)
        if self._phase == Phase.IDLE:
            # Idle display shows what the next work phase will run for
            self._remaining = self._work_duration
            self._current_configured_duration = self._work_duration

    @property
    def short_break_duration(self) -> float:
        return self._short_break_duration

    @short_break_duration.setter
    def short_break_duration(self, seconds: float):
        self._short_break_duration = self._check_duration(seconds)

    @property
    def long_break_duration(self) -> float:
        return self._long_break_duration

    @long_break_duration.setter
    def long_break_duration(self, seconds: float):
        self._long_break_duration = self._check_duration(seconds)

    @staticmethod
    def _check_duration(seconds: float) -> float:
        if seconds <= 0:
            raise ValueError(f"Duration must be positive, got {seconds}")
        return float(seconds)

    def apply_settings(self, settings: UserSettings) -> None:
        """Take over durations from user settings for future phases."""
        self.work_duration = settings.work_duration_seconds
        self.short_break_duration = settings.short_break_seconds
        self.long_break_duration = settings.long_break_seconds

    def is_running(self) -> bool:
        return self._phase != Phase.IDLE

    def format_remaining(self) -> str:
        minutes, seconds = divmod(int(self._remaining), 60)
        return f"{minutes:02d}:{seconds:02d}"

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_work_session(self) -> None:
        """
        Start a fresh session with a work phase.

        Valid from any phase. A phase still running is ended as not completed.
        """
        self._timer.stop()
        if self._phase != Phase.IDLE:
            self._emit_exit(self._phase, natural=False, next_phase=Phase.WORKING)

        self._completed_work_intervals = 0
        self._start_phase(Phase.WORKING)

    def stop(self) -> None:
        """Cancel the running phase and return to IDLE."""
        self._timer.stop()
        previous = self._phase

        self._phase = Phase.IDLE
        self._target_time = None
        self._remaining = self._work_duration
        self._current_configured_duration = self._work_duration
        self.remaining_changed.emit(self.format_remaining(), self._remaining)

        if previous != Phase.IDLE:
            logger.info("Stopped during %s", previous.value)
            self._emit_exit(previous, natural=False, next_phase=None)

    def tick(self) -> None:
        """Called every second to update the countdown"""
        if self._phase == Phase.IDLE or self._target_time is None:
            return

        self._remaining = max(0.0, self._target_time - self.clock.monotonic())
        self.remaining_changed.emit(self.format_remaining(), self._remaining)

        if self._remaining <= 0:
            self._timer.stop()
            self._advance(self._phase)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _duration_for(self, phase: Phase) -> float:
        if phase == Phase.WORKING:
            return self._work_duration
        if phase == Phase.SHORT_BREAK:
            return self._short_break_duration
        if phase == Phase.LONG_BREAK:
            return self._long_break_duration
        raise ValueError(f"Phase {phase.value} has no duration")

    def _next_break(self) -> Phase:
        if (self._completed_work_intervals > 0
                and self._completed_work_intervals % self._intervals_before_long_break == 0):
            return Phase.LONG_BREAK
        return Phase.SHORT_BREAK

    def _advance(self, previous: Phase) -> None:
        """Natural expiry of `previous`: move on to the next phase."""
        if previous == Phase.WORKING:
            self._completed_work_intervals += 1
            logger.info("Work interval %d completed", self._completed_work_intervals)
            self.cycle_completed.emit(CycleCompleted(
                completed_work_intervals=self._completed_work_intervals,
                at=self.clock.now(),
            ))
            next_phase = self._next_break()
        else:
            next_phase = Phase.WORKING

        self._emit_exit(previous, natural=True, next_phase=next_phase)
        self._start_phase(next_phase)
        self._send_alert(previous, next_phase)

    def _start_phase(self, phase: Phase) -> None:
        duration = self._duration_for(phase)

        self._timer.stop()
        self._phase = phase
        self._current_configured_duration = duration
        self._remaining = duration
        self._target_time = self.clock.monotonic() + duration

        logger.info("Entering %s for %d seconds", phase.value, int(duration))
        self.remaining_changed.emit(self.format_remaining(), self._remaining)
        self.phase_entered.emit(PhaseEntered(
            phase=phase,
            configured_duration=duration,
            at=self.clock.now(),
        ))
        self._timer.start()

    def _emit_exit(self, phase: Phase, natural: bool, next_phase: Optional[Phase]) -> None:
        self.phase_exited.emit(PhaseExited(
            phase=phase,
            natural=natural,
            next_phase=next_phase,
            at=self.clock.now(),
        ))

    def _send_alert(self, previous: Phase, next_phase: Phase) -> None:
        """Fire-and-forget user alert. Delivery problems never affect timing."""
        if self.notifier is None:
            return

        if previous == Phase.WORKING:
            kind = tr("break.long") if next_phase == Phase.LONG_BREAK else tr("break.short")
            title = tr("alert.work_complete.title")
            body = tr("alert.work_complete.body", kind=kind)
        else:
            title = tr("alert.break_over.title")
            body = tr("alert.break_over.body")

        try:
            self.notifier.notify(title, body)
        except Exception:
            logger.exception("Error sending notification %r", title)
