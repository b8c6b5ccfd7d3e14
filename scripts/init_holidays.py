from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from zoppertrack.container import build_container
from zoppertrack.core.exceptions import DomainError

# National holidays for 2025; edit or pass --year to shift them.
DEFAULT_HOLIDAYS = [
    ("01-01", "New Year's Day"),
    ("01-26", "Republic Day"),
    ("03-13", "Holi"),
    ("04-18", "Good Friday"),
    ("08-15", "Independence Day"),
    ("10-02", "Gandhi Jayanti"),
    ("10-31", "Diwali"),
    ("12-25", "Christmas Day"),
]


def seed_holidays(store, *, year: int) -> tuple[list[str], list[str]]:
    """Create the missing default holidays; returns (added, skipped) date keys."""
    existing = {h.date_key for h in store.list_holidays()}
    added: list[str] = []
    skipped: list[str] = []
    for month_day, name in DEFAULT_HOLIDAYS:
        date_key = f"{year}-{month_day}"
        if date_key in existing:
            skipped.append(date_key)
            continue
        store.create_holiday(date_key=date_key, name=name)
        added.append(date_key)
    return added, skipped


def main() -> None:
    parser = argparse.ArgumentParser(description="Create default holidays through the ZopperTrack API")
    parser.add_argument("--year", type=int, default=2025)
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)

    try:
        added, skipped = seed_holidays(container.holidays_repo, year=args.year)
    except DomainError as e:
        print(f"FAILED: {e}")
        sys.exit(1)
    finally:
        container.client.close()

    print(f"OK: added {len(added)} holidays, {len(skipped)} already present -> {settings.API_CONFIG['base_url']}")


if __name__ == "__main__":
    main()
