"""
Delete stored cycles that started before a cutoff.
"""

import argparse
import datetime
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from focustimer.infra.config import configure_logging, get_settings
from focustimer.infra.repository import CycleRepository


def prune(repository: CycleRepository, cutoff: datetime.datetime, dry_run: bool = False) -> int:
    """Remove every cycle that started before cutoff. Returns the number removed."""
    removed = 0
    for record in repository.list_all():
        if record.start_time >= cutoff:
            continue
        if dry_run:
            print(f"Would remove {record.id} ({record.kind.value}, {record.start_time.astimezone():%Y-%m-%d %H:%M})")
            removed += 1
        elif repository.delete(record.id):
            removed += 1
    return removed


def main():
    parser = argparse.ArgumentParser(description="Delete old focus cycles")
    parser.add_argument("--days", type=int, default=90, help="Keep cycles from the last N days")
    parser.add_argument("--dry-run", action="store_true", help="Only list what would be removed")
    args = parser.parse_args()

    configure_logging("WARNING")
    repository = CycleRepository(get_settings().data_dir)
    cutoff = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=args.days)

    removed = prune(repository, cutoff, dry_run=args.dry_run)
    print(f"{'Matched' if args.dry_run else 'Removed'} {removed} cycle(s) older than {cutoff:%Y-%m-%d}.")


if __name__ == "__main__":
    main()
