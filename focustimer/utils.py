import sys
from pathlib import Path

def get_resource_path(relative_path: str) -> Path:
    """
    Get absolute path to a bundled resource, works for dev and for PyInstaller.

    Args:
        relative_path: Path relative to the focustimer package (e.g. "resources/templates")

    Returns:
        Absolute Path object
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller unpacks the package below _MEIPASS
        base_path = Path(sys._MEIPASS) / "focustimer"
    else:
        # This file is in focustimer/utils.py
        base_path = Path(__file__).parent.absolute()

    return base_path / relative_path
