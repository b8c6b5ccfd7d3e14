from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_TODAY_FETCH_WINDOW, FETCH_WINDOW_DAYS
from ..core.enums import DateFilter
from ..holidays.registry import HolidayRegistry
from ..visits.repository import VisitRepository
from .aggregator import AttendanceAggregator, resolve_range
from .model import AttendanceMatrix, DateRangeSelector

logger = logging.getLogger(__name__)


def fetch_window_for(
    selector: DateRangeSelector,
    today: date,
    *,
    today_window: str = DEFAULT_TODAY_FETCH_WINDOW,
) -> str:
    """Pick the API `dateFilter` whose window covers the displayed range.

    Visits are stamped with their submission time upstream, so a one-day
    view is populated from a wider window (`today_window`).
    """
    if selector.mode in (DateFilter.TODAY, DateFilter.YESTERDAY):
        return today_window
    if selector.mode.value in FETCH_WINDOW_DAYS:
        # Rolling views share their name with the API window.
        return selector.mode.value

    start, _ = resolve_range(selector, today)
    days_back = (today - start).days
    for name, reach in sorted(FETCH_WINDOW_DAYS.items(), key=lambda kv: kv[1]):
        if reach > days_back and reach > 0:
            return name

    logger.warning("Range starting %s is older than the widest API window; results will be partial", start)
    return "Last Year"


class AttendanceService:
    def __init__(
        self,
        visits: VisitRepository,
        holidays: HolidayRegistry,
        *,
        aggregator: Optional[AttendanceAggregator] = None,
        today_window: str = DEFAULT_TODAY_FETCH_WINDOW,
        clock: Callable[[], date] = today_local,
    ):
        self._visits = visits
        self._holidays = holidays
        self._aggregator = aggregator or AttendanceAggregator()
        self._today_window = today_window
        self._clock = clock

    def today(self) -> date:
        return self._clock()

    def build_matrix(self, selector: DateRangeSelector, *, executive_id: Optional[str] = None) -> AttendanceMatrix:
        """Fetch executives, visits and holidays, then aggregate.

        Any fetch failure propagates; nothing is rendered from partial data.
        """
        today = self.today()
        window = fetch_window_for(selector, today, today_window=self._today_window)

        executives = self._visits.list_executives()
        # Unknown ids fall back to every executive, so only filter upstream on a known one.
        known_id = executive_id if any(e.id == executive_id for e in executives) else None
        visits = self._visits.list_visits(date_filter=window, executive_id=known_id)
        holidays = self._holidays.load()

        logger.info(
            "Aggregating %d visits for %d executives (%s, window=%s)",
            len(visits), len(executives), selector.mode.value, window,
        )
        return self._aggregator.aggregate(
            visits,
            selector,
            holidays,
            executives,
            today=today,
            executive_id=executive_id or None,
        )
