"""
Tests for the file-based cycle repository.
"""

import json
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from focustimer.domain.models import ActivitySample, CycleKind, CycleRecord, UserSettings
from focustimer.infra.errors import CorruptRecordError
from focustimer.infra.repository import CycleRepository


def make_record(start: datetime, kind: CycleKind = CycleKind.WORK, seconds: float = 1500,
                apps=("Code", "Firefox")) -> CycleRecord:
    record = CycleRecord(start_time=start, configured_duration=1500, kind=kind)
    if kind == CycleKind.WORK:
        for i, app in enumerate(apps):
            record.add_activity(ActivitySample(timestamp=start + timedelta(seconds=10 * i), app_name=app))
    record.finalize(start + timedelta(seconds=seconds), was_completed=True)
    return record


def parse_timestamp(value: str) -> datetime:
    """ISO-8601 with an explicit offset; Z is accepted for UTC"""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    assert parsed.tzinfo is not None
    return parsed


class TestCycleRecords:
    def test_round_trip(self, repository):
        record = make_record(datetime(2026, 3, 2, 10, 15, 30, 123456))
        assert repository.save(record)

        loaded = repository.load(record.id)
        assert loaded == record

    def test_round_trip_open_record(self, repository):
        record = CycleRecord(start_time=datetime(2026, 3, 2, 10, 0), configured_duration=300,
                             kind=CycleKind.SHORT_BREAK)
        assert repository.save(record)
        loaded = repository.load(record.id)
        assert loaded == record
        assert loaded.end_time is None
        assert loaded.actual_duration is None

    def test_load_missing_returns_none(self, repository):
        assert repository.load(uuid4()) is None

    def test_directories_created_lazily(self, repository):
        assert not repository.root_dir.exists()
        assert repository.list_all() == []
        assert not repository.root_dir.exists()

        repository.save(make_record(datetime(2026, 3, 2, 9, 0)))
        assert repository.cycles_dir.is_dir()

    def test_file_naming_and_wire_format(self, repository):
        record = make_record(datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc))
        repository.save(record)

        path = repository.cycles_dir / f"cycle_{record.id}.json"
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["id"] == str(record.id)
        assert parse_timestamp(data["startTime"]) == datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)
        assert parse_timestamp(data["endTime"]) == datetime(2026, 3, 2, 9, 25, tzinfo=timezone.utc)
        assert data["configuredDuration"] == 1500
        assert data["actualDuration"] == 1500
        assert data["kind"] == "work"
        assert data["wasCompleted"] is True
        assert data["appActivities"][0]["appName"] == "Code"
        assert set(data["appActivities"][0]) == {"id", "timestamp", "appName"}

    def test_open_record_omits_end_fields(self, repository):
        record = CycleRecord(start_time=datetime(2026, 3, 2, 9, 0), configured_duration=1500,
                             kind=CycleKind.WORK)
        repository.save(record)
        data = json.loads((repository.cycles_dir / f"cycle_{record.id}.json").read_text())
        assert "endTime" not in data
        assert "actualDuration" not in data

    def test_save_overwrites_same_id(self, repository):
        record = make_record(datetime(2026, 3, 2, 9, 0))
        repository.save(record)

        updated = record.model_copy(update={"was_completed": False})
        repository.save(updated)

        assert repository.load(record.id).was_completed is False
        assert len(list(repository.cycles_dir.iterdir())) == 1

    def test_no_temp_files_left_behind(self, repository):
        for i in range(3):
            repository.save(make_record(datetime(2026, 3, 2, 9 + i, 0)))
        names = [p.name for p in repository.cycles_dir.iterdir()]
        assert all(n.startswith("cycle_") and n.endswith(".json") for n in names)

    def test_list_all_most_recent_first(self, repository):
        t1 = make_record(datetime(2026, 3, 1, 9, 0))
        t2 = make_record(datetime(2026, 3, 2, 9, 0))
        t3 = make_record(datetime(2026, 3, 3, 9, 0))
        for record in (t2, t3, t1):
            repository.save(record)

        assert [r.id for r in repository.list_all()] == [t3.id, t2.id, t1.id]

    def test_list_all_skips_malformed_files(self, repository, caplog):
        good = make_record(datetime(2026, 3, 2, 9, 0))
        repository.save(good)
        (repository.cycles_dir / "cycle_broken.json").write_text("{not json", encoding="utf-8")
        (repository.cycles_dir / "cycle_wrong.json").write_text('{"id": "x"}', encoding="utf-8")
        (repository.cycles_dir / "notes.txt").write_text("ignored", encoding="utf-8")

        records = repository.list_all()

        assert [r.id for r in records] == [good.id]
        assert "cycle_broken.json" in caplog.text

    def test_list_all_mixes_offset_and_local_timestamps(self, repository):
        local = make_record(datetime(2026, 3, 2, 9, 0))
        repository.save(local)

        def write_external(start_time: str, end_time: str):
            cycle_id = uuid4()
            document = {
                "id": str(cycle_id),
                "startTime": start_time,
                "configuredDuration": 1500,
                "actualDuration": 1500,
                "endTime": end_time,
                "kind": "work",
                "wasCompleted": True,
                "appActivities": [],
            }
            path = repository.cycles_dir / f"cycle_{cycle_id}.json"
            path.write_text(json.dumps(document), encoding="utf-8")
            return cycle_id

        utc_id = write_external("2026-03-03T09:00:00Z", "2026-03-03T09:25:00Z")
        offset_id = write_external("2026-03-04T09:00:00+02:00", "2026-03-04T09:25:00+02:00")
        legacy_id = write_external("2026-03-01T09:00:00", "2026-03-01T09:25:00")

        records = repository.list_all()

        assert [r.id for r in records] == [offset_id, utc_id, local.id, legacy_id]
        assert all(r.start_time.tzinfo is not None for r in records)
        assert records[0].actual_duration == 1500

    def test_saved_timestamps_carry_an_offset(self, repository):
        record = make_record(datetime(2026, 3, 2, 9, 0))
        repository.save(record)

        data = json.loads((repository.cycles_dir / f"cycle_{record.id}.json").read_text())

        parse_timestamp(data["startTime"])
        parse_timestamp(data["endTime"])
        parse_timestamp(data["appActivities"][0]["timestamp"])

    def test_load_malformed_raises(self, repository):
        record = make_record(datetime(2026, 3, 2, 9, 0))
        repository.save(record)
        (repository.cycles_dir / f"cycle_{record.id}.json").write_text("[]", encoding="utf-8")

        with pytest.raises(CorruptRecordError):
            repository.load(record.id)

    def test_delete(self, repository):
        record = make_record(datetime(2026, 3, 2, 9, 0))
        repository.save(record)

        assert repository.delete(record.id) is True
        assert repository.load(record.id) is None
        assert repository.delete(record.id) is False

    def test_delete_missing_has_no_side_effect(self, repository):
        other = make_record(datetime(2026, 3, 2, 9, 0))
        repository.save(other)

        assert repository.delete(uuid4()) is False
        assert [r.id for r in repository.list_all()] == [other.id]

    def test_save_failure_returns_false(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("x")
        repository = CycleRepository(blocker)

        assert repository.save(make_record(datetime(2026, 3, 2, 9, 0))) is False

    def test_cycles_dir_location(self, tmp_path):
        repository = CycleRepository(tmp_path)
        assert repository.cycles_dir == tmp_path / "data" / "cycles"


class TestSettings:
    def test_defaults_when_missing(self, repository):
        settings = repository.load_settings()
        assert settings == UserSettings()
        assert settings.work_duration_minutes == 25
        assert settings.short_break_minutes == 5
        assert settings.long_break_minutes == 15
        assert settings.sound_enabled is True

    def test_round_trip(self, repository):
        settings = UserSettings(work_duration_minutes=50, short_break_minutes=10,
                                long_break_minutes=20, sound_enabled=False)
        assert repository.save_settings(settings)
        assert repository.load_settings() == settings

    def test_wire_format(self, repository):
        repository.save_settings(UserSettings())
        data = json.loads(repository.settings_path.read_text(encoding="utf-8"))
        assert data == {
            "workDurationMinutes": 25,
            "shortBreakMinutes": 5,
            "longBreakMinutes": 15,
            "soundEnabled": True,
        }

    @pytest.mark.parametrize("content", ["{broken", '{"workDurationMinutes": -3}', "null"])
    def test_corrupt_document_gives_defaults(self, repository, content):
        repository.settings_dir.mkdir(parents=True)
        repository.settings_path.write_text(content, encoding="utf-8")
        assert repository.load_settings() == UserSettings()

    def test_save_replaces_wholesale(self, repository):
        repository.save_settings(UserSettings(work_duration_minutes=40))
        repository.save_settings(UserSettings(sound_enabled=False))
        loaded = repository.load_settings()
        assert loaded.work_duration_minutes == 25
        assert loaded.sound_enabled is False
