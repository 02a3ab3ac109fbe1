"""
macOS activity sampler using pyobjc.

Asks NSWorkspace for the frontmost application.
"""

from .base import ActivitySampler

try:
    from AppKit import NSWorkspace
    HAS_PYOBJC = True
except ImportError:
    HAS_PYOBJC = False


class MacOSSampler(ActivitySampler):
    """Reports the localized name of the frontmost application (e.g. 'Xcode')."""

    def get_active_app_name(self) -> str:
        if not HAS_PYOBJC:
            return self.UNKNOWN_APP

        front_app = NSWorkspace.sharedWorkspace().frontmostApplication()
        if front_app is None:
            return self.UNKNOWN_APP
        return front_app.localizedName() or "Unknown App"
