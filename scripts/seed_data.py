"""
Data Seeder for Focus Timer.
Writes a few days of realistic cycles for testing and demo purposes.
"""

import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from focustimer.domain.models import ActivitySample, CycleKind, CycleRecord
from focustimer.infra.config import get_settings
from focustimer.infra.repository import CycleRepository

APPS = ["Code", "Firefox", "Terminal", "Slack", "Obsidian"]


def seed_day(repository: CycleRepository, day_start: datetime, sessions: int = 6) -> int:
    """Write alternating work/break cycles starting at day_start"""
    current = day_start
    written = 0
    for i in range(1, sessions + 1):
        interrupted = random.random() < 0.15
        work_seconds = random.randint(300, 1400) if interrupted else 1500
        work = CycleRecord(start_time=current, configured_duration=1500, kind=CycleKind.WORK)
        for offset in range(0, work_seconds, 10):
            work.add_activity(ActivitySample(
                timestamp=current + timedelta(seconds=offset),
                app_name=random.choice(APPS),
            ))
        current += timedelta(seconds=work_seconds)
        work.finalize(current, was_completed=not interrupted)
        written += repository.save(work)

        if interrupted:
            current += timedelta(minutes=random.randint(10, 40))
            continue

        kind = CycleKind.LONG_BREAK if i % 4 == 0 else CycleKind.SHORT_BREAK
        break_seconds = 900 if kind == CycleKind.LONG_BREAK else 300
        pause = CycleRecord(start_time=current, configured_duration=break_seconds, kind=kind)
        current += timedelta(seconds=break_seconds)
        pause.finalize(current, was_completed=True)
        written += repository.save(pause)
    return written


def seed(days: int = 5):
    repository = CycleRepository(get_settings().data_dir)
    print(f"Seeding cycles into {repository.cycles_dir}")

    today = datetime.now().astimezone().replace(hour=9, minute=0, second=0, microsecond=0)
    total = 0
    for delta in range(days):
        day_start = today - timedelta(days=delta)
        if day_start.weekday() >= 5:
            continue
        total += seed_day(repository, day_start)

    print(f"Seeding complete: {total} cycles written.")


if __name__ == "__main__":
    seed()
