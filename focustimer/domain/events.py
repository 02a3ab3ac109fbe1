"""
Phase transition events emitted by the Pomodoro engine.

Listeners receive one of a small closed set of immutable events through the
engine's Qt signals.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from .models import Phase, Timestamp


class PhaseEntered(BaseModel):
    """A timed phase has started."""
    model_config = ConfigDict(frozen=True)

    phase: Phase
    configured_duration: float  # seconds
    at: Timestamp


class PhaseExited(BaseModel):
    """
    A timed phase has ended.

    natural is True when the countdown expired, False when the phase was
    cut short by stop() or by starting a new session.
    """
    model_config = ConfigDict(frozen=True)

    phase: Phase
    natural: bool
    next_phase: Optional[Phase] = None
    at: Timestamp


class CycleCompleted(BaseModel):
    """A work interval ran to completion."""
    model_config = ConfigDict(frozen=True)

    completed_work_intervals: int
    at: Timestamp
