"""
Factory for creating platform-specific activity samplers.

Architecture Decision: Factory Pattern
Instantiates the correct sampler based on the current OS.
"""

import logging
import platform

from .base import ActivitySampler

logger = logging.getLogger(__name__)


class DummySampler(ActivitySampler):
    """Fallback for platforms without a foreground-app lookup."""

    def get_active_app_name(self) -> str:
        return self.UNKNOWN_APP


def create_activity_sampler(interval_seconds: float = 10.0, clock=None) -> ActivitySampler:
    """
    Create the appropriate activity sampler for the current platform.

    Returns:
        ActivitySampler instance for the current platform
    """
    system = platform.system()

    if system == "Windows":
        from .windows_sampler import WindowsSampler
        return WindowsSampler(interval_seconds, clock)
    elif system == "Linux":
        from .linux_sampler import LinuxSampler
        return LinuxSampler(interval_seconds, clock)
    elif system == "Darwin":  # macOS
        from .macos_sampler import MacOSSampler
        return MacOSSampler(interval_seconds, clock)

    logger.warning("Activity sampling not supported on %s", system)
    return DummySampler(interval_seconds, clock)
