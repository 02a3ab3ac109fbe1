"""OS-specific foreground application samplers"""

from .base import ActivitySampler
from .factory import DummySampler, create_activity_sampler

__all__ = ["ActivitySampler", "DummySampler", "create_activity_sampler"]
