"""Services layer - Business logic"""

from .clock import SystemClock
from .cycle_recorder import CycleRecorder
from .cycle_writer import CycleWriter
from .pomodoro_engine import PomodoroEngine
from .summary_service import CycleSummary, SummaryService

__all__ = [
    "SystemClock", "CycleRecorder", "CycleWriter", "PomodoroEngine",
    "CycleSummary", "SummaryService",
]
