"""
Pytest configuration and fixtures.
"""

import datetime
import sys
from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from focustimer.domain.models import UserSettings
from focustimer.infra.activity.base import ActivitySampler
from focustimer.infra.repository import CycleRepository
from focustimer.services.pomodoro_engine import PomodoroEngine


CLOCK_START = datetime.datetime(2026, 1, 5, 9, 0, 0, tzinfo=datetime.timezone.utc)


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self, start: datetime.datetime = CLOCK_START):
        self._now = start
        self._monotonic = 1000.0

    def now(self) -> datetime.datetime:
        return self._now

    def monotonic(self) -> float:
        return self._monotonic

    def advance(self, seconds: float):
        self._now += datetime.timedelta(seconds=seconds)
        self._monotonic += seconds


class ListWriter:
    """Synchronous stand-in for CycleWriter"""

    def __init__(self):
        self.records = []

    def submit(self, record):
        self.records.append(record)


class RecordingNotifier:
    def __init__(self):
        self.alerts = []

    def notify(self, title: str, body: str):
        self.alerts.append((title, body))


class StubSampler(ActivitySampler):
    """Sampler reporting whatever app_name is set to"""

    def __init__(self, app_name: str = "Editor", **kwargs):
        super().__init__(**kwargs)
        self.app_name = app_name

    def get_active_app_name(self) -> str:
        return self.app_name


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Qt timers and thread pools need an application instance"""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def short_settings():
    """One-minute work and short break, two-minute long break"""
    return UserSettings(work_duration_minutes=1, short_break_minutes=1, long_break_minutes=2)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def engine(short_settings, notifier, clock):
    engine = PomodoroEngine(settings=short_settings, notifier=notifier, clock=clock)
    yield engine
    engine.stop()


@pytest.fixture
def repository(tmp_path):
    return CycleRepository(tmp_path / "focustimer")


def expire(engine, clock):
    """Run the clock to the end of the current phase and deliver the tick"""
    clock.advance(engine.remaining)
    engine.tick()
