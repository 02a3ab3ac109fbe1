"""UI layer - PySide6 system tray host"""

from .tray_icon import SystemTrayApp

__all__ = ["SystemTrayApp"]
