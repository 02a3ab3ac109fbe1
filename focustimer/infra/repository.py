"""
Repository Pattern Implementation.

Architecture Decision: Why one JSON file per cycle?
- A failed or interrupted write can only ever affect a single record
- Files are human-readable and easy to inspect or copy elsewhere
- Writes go to a temporary file first and are then renamed into place, so a
  reader never sees a partially written document

Layout below the root directory:
    data/cycles/cycle_<uuid>.json
    settings/preferences.json
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ValidationError

from focustimer.domain.models import CycleRecord, UserSettings
from focustimer.infra.errors import CorruptRecordError, StorageError

logger = logging.getLogger(__name__)


class CycleRepository:
    """
    Handles persistence of cycle records and the user settings document.

    Directories are created on first write. Single process, single user:
    no cross-process locking is done.
    """

    CYCLE_PREFIX = "cycle_"
    CYCLE_EXTENSION = ".json"
    SETTINGS_FILENAME = "preferences.json"

    def __init__(self, root_dir: Path):
        self.root_dir = Path(root_dir)

    @property
    def cycles_dir(self) -> Path:
        """Directory holding the individual cycle files"""
        return self.root_dir / "data" / "cycles"

    @property
    def settings_dir(self) -> Path:
        return self.root_dir / "settings"

    @property
    def settings_path(self) -> Path:
        return self.settings_dir / self.SETTINGS_FILENAME

    def _cycle_path(self, cycle_id: UUID) -> Path:
        return self.cycles_dir / f"{self.CYCLE_PREFIX}{cycle_id}{self.CYCLE_EXTENSION}"

    def _write_atomic(self, path: Path, model: BaseModel) -> None:
        """Write a model as JSON to a temp file in the same directory, then rename."""
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = model.model_dump_json(by_alias=True, exclude_none=True, indent=2)

        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    # ------------------------------------------------------------------
    # Cycle records
    # ------------------------------------------------------------------

    def save(self, record: CycleRecord) -> bool:
        """
        Persist a cycle record, replacing any record with the same id.

        Returns:
            True on success, False if the file could not be written
        """
        path = self._cycle_path(record.id)
        try:
            self._write_atomic(path, record)
        except OSError as e:
            logger.error("Error saving cycle %s: %s", record.id, e)
            return False

        logger.debug("Cycle saved to %s", path)
        return True

    def load(self, cycle_id: UUID) -> Optional[CycleRecord]:
        """
        Load a single cycle record.

        Returns:
            The record, or None if no file exists for this id

        Raises:
            CorruptRecordError: the file exists but is not a valid record
            StorageError: the file exists but could not be read
        """
        path = self._cycle_path(cycle_id)
        if not path.exists():
            return None

        try:
            data = path.read_text(encoding='utf-8')
        except UnicodeDecodeError as e:
            logger.error("Error decoding cycle %s: %s", cycle_id, e)
            raise CorruptRecordError(f"Malformed cycle file {path}") from e
        except OSError as e:
            logger.error("Error reading cycle %s: %s", cycle_id, e)
            raise StorageError(f"Could not read {path}") from e

        try:
            return CycleRecord.model_validate_json(data)
        except ValidationError as e:
            logger.error("Error decoding cycle %s: %s", cycle_id, e)
            raise CorruptRecordError(f"Malformed cycle file {path}") from e

    def list_all(self) -> List[CycleRecord]:
        """
        Load every stored cycle, most recent start time first.

        Unreadable or malformed files are logged and skipped.
        """
        if not self.cycles_dir.is_dir():
            return []

        try:
            paths = sorted(self.cycles_dir.glob(f"{self.CYCLE_PREFIX}*{self.CYCLE_EXTENSION}"))
        except OSError as e:
            logger.error("Error listing cycles in %s: %s", self.cycles_dir, e)
            return []

        records = []
        for path in paths:
            try:
                records.append(CycleRecord.model_validate_json(path.read_text(encoding='utf-8')))
            except (OSError, UnicodeDecodeError, ValidationError) as e:
                logger.warning("Skipping unreadable cycle file %s: %s", path.name, e)

        records.sort(key=lambda r: r.start_time, reverse=True)
        return records

    def delete(self, cycle_id: UUID) -> bool:
        """
        Delete a cycle record.

        Returns:
            True if a file was removed, False if there was nothing to remove
            or removal failed
        """
        path = self._cycle_path(cycle_id)
        try:
            path.unlink()
        except FileNotFoundError:
            logger.debug("Cannot delete cycle %s: not found", cycle_id)
            return False
        except OSError as e:
            logger.error("Error deleting cycle %s: %s", cycle_id, e)
            return False

        logger.info("Deleted cycle %s", cycle_id)
        return True

    # ------------------------------------------------------------------
    # User settings
    # ------------------------------------------------------------------

    def save_settings(self, settings: UserSettings) -> bool:
        """Replace the settings document. Returns False on I/O failure."""
        try:
            self._write_atomic(self.settings_path, settings)
        except OSError as e:
            logger.error("Error saving user settings: %s", e)
            return False

        logger.debug("User settings saved to %s", self.settings_path)
        return True

    def load_settings(self) -> UserSettings:
        """Load the settings document, falling back to defaults. Never raises."""
        if not self.settings_path.exists():
            logger.info("Preferences file not found. Using default settings.")
            return UserSettings()

        try:
            return UserSettings.model_validate_json(self.settings_path.read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("Error loading user settings: %s. Using default settings.", e)
            return UserSettings()
