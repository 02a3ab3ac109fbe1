"""
Linux (X11) activity sampler using xdotool and psutil.

Wayland sessions usually do not expose the focused window; the sampler then
reports 'Unknown'.
"""

import logging
import shutil
import subprocess

import psutil

from .base import ActivitySampler

logger = logging.getLogger(__name__)


class LinuxSampler(ActivitySampler):
    """Reports the process name owning the focused X11 window."""

    COMMAND_TIMEOUT_SECONDS = 2

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._xdotool = shutil.which("xdotool")
        if not self._xdotool:
            logger.warning("xdotool not installed; application sampling disabled")

    def get_active_app_name(self) -> str:
        if not self._xdotool:
            return self.UNKNOWN_APP

        try:
            result = subprocess.run(
                [self._xdotool, "getwindowfocus", "getwindowpid"],
                capture_output=True, text=True, timeout=self.COMMAND_TIMEOUT_SECONDS,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("xdotool failed: %s", e)
            return self.UNKNOWN_APP

        pid_text = result.stdout.strip()
        if result.returncode != 0 or not pid_text.isdigit():
            return self.UNKNOWN_APP

        try:
            return psutil.Process(int(pid_text)).name()
        except psutil.Error:
            return self.UNKNOWN_APP
