"""Domain layer - Pure business entities and events"""

from .events import CycleCompleted, PhaseEntered, PhaseExited
from .models import (
    ActivitySample, CycleKind, CycleRecord, Phase, UserSettings, ensure_aware,
)

__all__ = [
    "ActivitySample", "CycleKind", "CycleRecord", "Phase", "UserSettings",
    "PhaseEntered", "PhaseExited", "CycleCompleted", "ensure_aware",
]
