from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import date, timedelta
from typing import AbstractSet, Optional

from ..common.datetime_utils import month_bounds, parse_ddmmyyyy, parse_iso_date, same_day_last_year, to_date_key
from ..core.enums import DateFilter
from ..visits.model import Executive, VisitRecord
from .calendar.base import WeekendPolicy
from .calendar.sunday_policy import SundayWeekendPolicy
from .model import AttendanceCell, AttendanceMatrix, AttendanceRow, DateRangeSelector, ExecutiveSummary

logger = logging.getLogger(__name__)

PresenceIndex = dict[tuple[str, str], list[str]]

# Rolling ranges end today; value is how many days before today they start.
ROLLING_DAYS_BACK = {
    DateFilter.LAST_7_DAYS: 6,
    DateFilter.LAST_30_DAYS: 29,
    DateFilter.LAST_90_DAYS: 89,
}


def resolve_range(selector: DateRangeSelector, today: date) -> tuple[date, date]:
    if selector.mode == DateFilter.TODAY:
        return today, today
    if selector.mode == DateFilter.YESTERDAY:
        yesterday = today - timedelta(days=1)
        return yesterday, yesterday
    if selector.mode in ROLLING_DAYS_BACK:
        return today - timedelta(days=ROLLING_DAYS_BACK[selector.mode]), today
    if selector.mode == DateFilter.LAST_YEAR:
        return same_day_last_year(today), today
    return month_bounds(int(selector.year), int(selector.month))


def enumerate_date_keys(selector: DateRangeSelector, today: date) -> list[str]:
    """Day keys to display: newest first, except Custom months which run ascending."""
    start, end = resolve_range(selector, today)
    keys: list[str] = []
    cursor = start
    while cursor <= end:
        keys.append(to_date_key(cursor))
        cursor += timedelta(days=1)
    if selector.mode != DateFilter.CUSTOM:
        keys.reverse()
    return keys


def build_presence_index(visits: Iterable[VisitRecord]) -> PresenceIndex:
    """(date_key, executive_id) -> distinct store names, first-seen order.

    Visits whose date is not a valid dd/mm/yyyy day are skipped.
    """
    index: PresenceIndex = {}
    for v in visits:
        day = parse_ddmmyyyy(v.visit_date)
        if day is None:
            continue
        stores = index.setdefault((to_date_key(day), v.executive_id), [])
        name = (v.store_name or "").strip()
        if name and name not in stores:
            stores.append(name)
    return index


class AttendanceAggregator:
    """Turns raw visits into the per-executive / per-day attendance matrix."""

    def __init__(self, *, weekend_policy: Optional[WeekendPolicy] = None):
        self._weekend_policy = weekend_policy or SundayWeekendPolicy()

    def aggregate(
        self,
        visits: Iterable[VisitRecord],
        selector: DateRangeSelector,
        holidays: AbstractSet[str],
        executives: Sequence[Executive],
        *,
        today: date,
        executive_id: Optional[str] = None,
    ) -> AttendanceMatrix:
        date_keys = enumerate_date_keys(selector, today)
        presence = build_presence_index(visits)
        visible = self._visible_executives(executives, executive_id)

        weekend = {k: self._weekend_policy.is_weekend(parse_iso_date(k)) for k in date_keys}

        rows = []
        for executive in visible:
            cells = tuple(
                AttendanceCell(
                    date_key=k,
                    executive_id=executive.id,
                    visited=(k, executive.id) in presence,
                    stores=tuple(presence.get((k, executive.id), ())),
                    is_weekend=weekend[k],
                    is_holiday=k in holidays,
                )
                for k in date_keys
            )
            working = [c for c in cells if c.is_working_day]
            summary = ExecutiveSummary(
                present_days=sum(1 for c in working if c.visited),
                working_days=len(working),
            )
            rows.append(AttendanceRow(executive=executive, summary=summary, cells=cells))

        return AttendanceMatrix(selector=selector, date_keys=tuple(date_keys), rows=tuple(rows))

    @staticmethod
    def _visible_executives(executives: Sequence[Executive], executive_id: Optional[str]) -> list[Executive]:
        if not executive_id:
            return list(executives)
        selected = [e for e in executives if e.id == executive_id]
        if not selected:
            logger.warning("Unknown executive %r; showing all executives", executive_id)
            return list(executives)
        return selected
