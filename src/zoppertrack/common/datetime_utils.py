from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional

from ..core.constants import DATE_KEY_FORMAT, VISIT_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def parse_ddmmyyyy(value: str) -> Optional[date]:
    """Parse a 'dd/mm/yyyy' visit date; None when it is not a real day."""
    try:
        return datetime.strptime((value or "").strip(), VISIT_DATE_FORMAT).date()
    except ValueError:
        return None


def to_date_key(value: date) -> str:
    return value.strftime(DATE_KEY_FORMAT)


def format_date_key_display(date_key: str) -> str:
    """YYYY-MM-DD -> 'dd mm yyyy' (column headers)."""
    parts = date_key.split("-")
    if len(parts) != 3:
        return date_key
    y, m, d = parts
    return f"{d.zfill(2)} {m.zfill(2)} {y}"


def format_date_key_slashed(date_key: str) -> str:
    """YYYY-MM-DD -> 'dd/mm/yyyy' (holiday labels)."""
    return parse_iso_date(date_key).strftime(VISIT_DATE_FORMAT)


def is_sunday(value: date) -> bool:
    return value.weekday() == 6


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def same_day_last_year(value: date) -> date:
    """One calendar year earlier; 29 Feb falls back to 28 Feb."""
    try:
        return value.replace(year=value.year - 1)
    except ValueError:
        return value.replace(year=value.year - 1, day=28)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()
