"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Cycle records and settings are persisted as JSON documents. Pydantic validates
them when they are read back from disk and gives us a stable wire format
(camelCase field names, ISO-8601 timestamps) for free.

All timestamps are timezone-aware. A naive value (from an older file or a
caller using datetime.now()) is taken to be local time.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, List, Optional
from uuid import UUID, uuid4

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def ensure_aware(value: datetime) -> datetime:
    """Return value with a UTC offset attached, reading naive values as local time."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.astimezone()
    return value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


Timestamp = Annotated[datetime, AfterValidator(ensure_aware)]


class Phase(str, Enum):
    """Phase of the Pomodoro session. IDLE is the only phase without a timer."""

    IDLE = "idle"
    WORKING = "working"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"


class CycleKind(str, Enum):
    """Kind of a stored cycle. Mirrors Phase minus IDLE."""

    WORK = "work"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"

    @classmethod
    def from_phase(cls, phase: Phase) -> "CycleKind":
        if phase == Phase.WORKING:
            return cls.WORK
        if phase == Phase.SHORT_BREAK:
            return cls.SHORT_BREAK
        if phase == Phase.LONG_BREAK:
            return cls.LONG_BREAK
        raise ValueError(f"Phase {phase.value} has no cycle kind")


class _WireModel(BaseModel):
    """Base for models persisted with camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ActivitySample(_WireModel):
    """
    A single observation of the foreground application.

    Immutable once created.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    timestamp: Timestamp
    app_name: str


class CycleRecord(_WireModel):
    """
    Represents one timed interval (work or break).

    A record is open while its phase is running. It is finalized exactly once
    when the phase is left, after which it is handed to the repository and
    never mutated again.
    """

    id: UUID = Field(default_factory=uuid4)
    start_time: Timestamp = Field(default_factory=utc_now)
    configured_duration: float = Field(..., gt=0, description="Seconds")
    actual_duration: Optional[float] = Field(default=None, ge=0, description="Seconds")
    end_time: Optional[Timestamp] = None
    kind: CycleKind
    was_completed: bool = False
    app_activities: List[ActivitySample] = Field(default_factory=list)

    @property
    def is_open(self) -> bool:
        return self.end_time is None

    def add_activity(self, sample: ActivitySample) -> None:
        """Append a sample. Only allowed while the record is open."""
        if not self.is_open:
            raise ValueError(f"Cycle {self.id} is already finalized")
        self.app_activities.append(sample)

    def finalize(self, end_time: datetime, was_completed: bool) -> None:
        """Close the record. Can only happen once."""
        if not self.is_open:
            raise ValueError(f"Cycle {self.id} is already finalized")
        # Clock adjustments must never produce a negative duration
        end_time = max(ensure_aware(end_time), self.start_time)
        self.end_time = end_time
        self.actual_duration = (end_time - self.start_time).total_seconds()
        self.was_completed = was_completed


class UserSettings(_WireModel):
    """
    User configuration persisted in preferences.json.

    Durations are whole minutes. Changing them never affects a phase that is
    already running.
    """

    work_duration_minutes: int = Field(default=25, gt=0, description="Work phase length")
    short_break_minutes: int = Field(default=5, gt=0, description="Short break length")
    long_break_minutes: int = Field(default=15, gt=0, description="Long break length")
    sound_enabled: bool = Field(default=True, description="Play a sound with alerts")

    @property
    def work_duration_seconds(self) -> float:
        return self.work_duration_minutes * 60.0

    @property
    def short_break_seconds(self) -> float:
        return self.short_break_minutes * 60.0

    @property
    def long_break_seconds(self) -> float:
        return self.long_break_minutes * 60.0
