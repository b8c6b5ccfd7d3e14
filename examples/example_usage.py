"""Example: use the service layer directly (no Flask).

Prints this month's attendance summary for every executive.
"""

import importlib

from config import get_settings_module

from zoppertrack.attendance.model import DateRangeSelector
from zoppertrack.common.datetime_utils import today_local
from zoppertrack.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)

    today = today_local()
    matrix = container.attendance_service.build_matrix(DateRangeSelector.custom(month=today.month, year=today.year))
    for row in matrix.rows:
        print(f"{row.executive.name}: {row.summary.total_text} ({row.summary.percentage}%)")


if __name__ == "__main__":
    main()
