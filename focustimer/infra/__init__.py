"""Infrastructure layer - Persistence, configuration and OS hooks"""

from .config import AppSettings, get_settings
from .errors import CorruptRecordError, StorageError
from .repository import CycleRepository

__all__ = ["AppSettings", "get_settings", "CorruptRecordError", "StorageError", "CycleRepository"]
