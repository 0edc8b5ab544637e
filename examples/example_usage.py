"""Example: use the service layer directly (no Flask).

Prints one owner's attendance for a month, grouped by day.
Usage: python examples/example_usage.py <owner_id> <year> <month>
"""

import importlib
import sys

from dotenv import load_dotenv

from config import get_settings_module

from daily_checkin.container import build_container


def main(argv: list[str]) -> None:
    load_dotenv(override=False)
    owner_id, year, month = (argv + [None, None, None])[:3]
    if owner_id is None:
        raise SystemExit(__doc__)

    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    grouped = container.report_service.get_attendance_by_month(int(owner_id), year, month)
    for day, records in grouped.items():
        print(day)
        for r in records:
            print(f"  {r.checkin.strftime('%H:%M:%S')}  {r.name} ({r.code})")


if __name__ == "__main__":
    main(sys.argv[1:])
