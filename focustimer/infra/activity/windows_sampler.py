"""
Windows activity sampler using pywin32 and psutil.

Resolves the foreground window to its owning process name.
"""

import psutil

from .base import ActivitySampler

try:
    import win32gui
    import win32process
    HAS_WIN32 = True
except ImportError:
    HAS_WIN32 = False


class WindowsSampler(ActivitySampler):
    """Reports the process name of the foreground window (e.g. 'Code.exe')."""

    def get_active_app_name(self) -> str:
        if not HAS_WIN32:
            return self.UNKNOWN_APP

        hwnd = win32gui.GetForegroundWindow()
        if not hwnd:
            return self.UNKNOWN_APP

        _, pid = win32process.GetWindowThreadProcessId(hwnd)
        if not pid:
            return self.UNKNOWN_APP

        try:
            return psutil.Process(pid).name()
        except (psutil.Error, ProcessLookupError):
            return win32gui.GetWindowText(hwnd) or self.UNKNOWN_APP
