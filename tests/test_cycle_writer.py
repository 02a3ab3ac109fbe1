"""
Tests for background persistence through CycleWriter.
"""

from datetime import datetime, timedelta

from conftest import expire
from focustimer.domain.models import CycleKind, CycleRecord
from focustimer.infra.repository import CycleRepository
from focustimer.services.cycle_recorder import CycleRecorder
from focustimer.services.cycle_writer import CycleWriter


def finished_record(start: datetime) -> CycleRecord:
    record = CycleRecord(start_time=start, configured_duration=1500, kind=CycleKind.WORK)
    record.finalize(start + timedelta(minutes=25), was_completed=True)
    return record


def test_submitted_records_are_persisted(repository):
    writer = CycleWriter(repository)
    records = [finished_record(datetime(2026, 2, 1, 9 + i)) for i in range(3)]
    for record in records:
        writer.submit(record)

    assert writer.wait_for_done(5000)
    assert [r.id for r in repository.list_all()] == [r.id for r in reversed(records)]


def test_failed_write_is_logged_not_raised(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    writer = CycleWriter(CycleRepository(blocker))

    writer.submit(finished_record(datetime(2026, 2, 1, 9)))

    assert writer.wait_for_done(5000)
    assert "will not be retried" in caplog.text


def test_engine_to_disk(engine, repository, clock):
    writer = CycleWriter(repository)
    recorder = CycleRecorder(engine, writer)

    engine.start_work_session()
    expire(engine, clock)
    clock.advance(4)
    engine.stop()
    assert recorder.open_record is None
    assert writer.wait_for_done(5000)

    stored = repository.list_all()
    assert [(r.kind, r.was_completed) for r in stored] == [
        (CycleKind.SHORT_BREAK, False),
        (CycleKind.WORK, True),
    ]
    assert stored[0].actual_duration == 4
