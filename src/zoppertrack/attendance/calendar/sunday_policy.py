from __future__ import annotations

from datetime import date

from ...common.datetime_utils import is_sunday
from .base import WeekendPolicy


class SundayWeekendPolicy(WeekendPolicy):
    """Field executives work six days a week; only Sunday is off."""

    def is_weekend(self, day: date) -> bool:
        return is_sunday(day)
