"""
Background persistence of finished cycle records.

Disk writes run on a private single-thread QThreadPool so a slow disk never
delays the next engine tick. Writes are serialized in submission order.
"""

import logging

from PySide6.QtCore import QThreadPool

from focustimer.domain.models import CycleRecord
from focustimer.infra.repository import CycleRepository

logger = logging.getLogger(__name__)


class CycleWriter:
    """
    Fire-and-forget writer in front of a CycleRepository.

    A failed save is logged and the record is dropped. There is no retry
    queue yet.
    """

    def __init__(self, repository: CycleRepository):
        self.repository = repository
        self._pool = QThreadPool()
        self._pool.setMaxThreadCount(1)

    def submit(self, record: CycleRecord) -> None:
        """Queue a finalized record for writing. The caller must not mutate it afterwards."""
        self._pool.start(lambda: self._write(record))

    def _write(self, record: CycleRecord) -> None:
        if self.repository.save(record):
            logger.info("Saved cycle %s with %d app activities", record.id, len(record.app_activities))
        else:
            # TODO: keep failed records in an outbox and retry on the next submit
            logger.error("Cycle %s was not persisted and will not be retried", record.id)

    def wait_for_done(self, msecs: int = -1) -> bool:
        """Block until queued writes have finished. Used on shutdown and in tests."""
        return self._pool.waitForDone(msecs)
