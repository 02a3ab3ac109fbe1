"""
Cycle Recorder - Turns engine transitions into persisted cycle records.

Holds the single open-record slot. Everything here runs on the Qt main
thread together with the engine, so the open record is mutated in place.
Finished records are handed to the writer as deep copies.
"""

import datetime
import logging
from typing import Optional

from focustimer.domain.events import PhaseEntered, PhaseExited
from focustimer.domain.models import (
    ActivitySample, CycleKind, CycleRecord, Phase, ensure_aware,
)
from focustimer.services.clock import SystemClock

logger = logging.getLogger(__name__)


class CycleRecorder:
    """
    Opens a record when a phase starts and finalizes it when the phase ends.

    Args:
        engine: PomodoroEngine whose signals drive the recorder
        writer: Anything with submit(record), usually a CycleWriter
        sampler: Optional ActivitySampler, enabled only during work phases
        track_breaks: Also record short and long breaks

    The owner must keep a reference to the recorder. Qt drops signal
    connections to methods of an object that has been garbage-collected,
    and the recorder would silently stop recording.
    """

    def __init__(self, engine, writer, sampler=None, track_breaks: bool = True, clock=None):
        self.engine = engine
        self.writer = writer
        self.sampler = sampler
        self.track_breaks = track_breaks
        self.clock = clock or engine.clock

        self._open_record: Optional[CycleRecord] = None

        engine.phase_entered.connect(self._on_phase_entered)
        engine.phase_exited.connect(self._on_phase_exited)
        if sampler is not None:
            sampler.sampled.connect(self.record_activity)

    @property
    def open_record(self) -> Optional[CycleRecord]:
        return self._open_record

    def _on_phase_entered(self, event: PhaseEntered) -> None:
        if self._open_record is not None:
            # Engine always exits before entering; close anything left over
            logger.warning("Cycle %s still open at phase start, closing it", self._open_record.id)
            self._finalize(was_completed=False)

        if event.phase == Phase.WORKING:
            self._open(event, CycleKind.WORK)
            if self.sampler is not None:
                self.sampler.enable()
        elif self.track_breaks:
            self._open(event, CycleKind.from_phase(event.phase))

    def _on_phase_exited(self, event: PhaseExited) -> None:
        if event.phase == Phase.WORKING and self.sampler is not None:
            self.sampler.disable()
        self._finalize(was_completed=event.natural, end_time=event.at)

    def _open(self, event: PhaseEntered, kind: CycleKind) -> None:
        self._open_record = CycleRecord(
            start_time=event.at,
            configured_duration=event.configured_duration,
            kind=kind,
        )
        logger.info("New %s cycle started with ID: %s", kind.value, self._open_record.id)

    def _finalize(self, was_completed: bool, end_time: Optional[datetime.datetime] = None) -> None:
        record = self._open_record
        if record is None:
            return

        self._open_record = None
        record.finalize(end_time or self.clock.now(), was_completed)
        logger.info(
            "Cycle %s finished (completed=%s, %.0fs, %d app activities)",
            record.id, record.was_completed, record.actual_duration, len(record.app_activities),
        )
        self.writer.submit(record.model_copy(deep=True))

    def record_activity(self, app_name: str, timestamp: datetime.datetime) -> None:
        """
        Attach a foreground-app observation to the open work record.

        Samples arriving outside a work phase are dropped; the sampler and the
        engine can race at phase boundaries.
        """
        record = self._open_record
        if (record is None or record.kind != CycleKind.WORK
                or self.engine.phase != Phase.WORKING):
            logger.debug("Dropping activity sample %r: no active work cycle", app_name)
            return

        # Clamp to the record window so a late-delivered sample stays inside it
        timestamp = max(ensure_aware(timestamp), record.start_time)
        record.add_activity(ActivitySample(timestamp=timestamp, app_name=app_name))

    def flush(self, was_completed: bool = False) -> None:
        """Finalize and submit whatever record is open (e.g. on shutdown)."""
        if self._open_record is not None and self._open_record.kind == CycleKind.WORK:
            if self.sampler is not None:
                self.sampler.disable()
        self._finalize(was_completed=was_completed)
