"""
Script to print a summary of the cycles recorded on one day.
"""

import argparse
import datetime
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from focustimer.infra.config import configure_logging, get_settings
from focustimer.infra.repository import CycleRepository
from focustimer.services.summary_service import SummaryService


def main():
    parser = argparse.ArgumentParser(description="Summarize recorded focus cycles")
    parser.add_argument("--date", help="Day to summarize (YYYY-MM-DD), default today")
    parser.add_argument("--data-dir", type=Path, help="Override the data directory")
    args = parser.parse_args()

    try:
        day = datetime.date.fromisoformat(args.date) if args.date else datetime.date.today()
    except ValueError:
        print(f"Error: invalid date '{args.date}', expected YYYY-MM-DD")
        sys.exit(1)

    settings = get_settings()
    configure_logging("WARNING")

    repository = CycleRepository(args.data_dir or settings.data_dir)
    service = SummaryService(repository)
    print(service.render(service.summarize_day(day)))


if __name__ == "__main__":
    main()
