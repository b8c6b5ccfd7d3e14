from __future__ import annotations

from enum import Enum


class DateFilter(str, Enum):
    """Date range modes selectable on the attendance view."""

    TODAY = "Today"
    YESTERDAY = "Yesterday"
    LAST_7_DAYS = "Last 7 Days"
    LAST_30_DAYS = "Last 30 Days"
    LAST_90_DAYS = "Last 90 Days"
    LAST_YEAR = "Last Year"
    CUSTOM = "Custom"


class CellStatus(str, Enum):
    """Rendered state of one attendance cell, in precedence order."""

    HOLIDAY = "HOLIDAY"
    SUNDAY = "SUNDAY"
    VISITED = "VISITED"
    NOT_VISITED = "NOT VISITED"
