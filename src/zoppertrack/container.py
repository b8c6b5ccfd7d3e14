from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.aggregator import AttendanceAggregator
from .attendance.calendar.sunday_policy import SundayWeekendPolicy
from .attendance.model import DateRangeSelector
from .attendance.service import AttendanceService
from .client.api_client import ApiClient, ApiConfig
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS, DEFAULT_TODAY_FETCH_WINDOW
from .export.service import AttendanceExportService
from .filters.params import selector_from_params
from .filters.setting import DateFilterSetting
from .holidays.http_holiday_repository import HttpHolidayRepository
from .holidays.registry import HolidayRegistry
from .holidays.repository import HolidayStore
from .visits.http_visit_repository import HttpVisitRepository
from .visits.repository import VisitRepository


@dataclass(frozen=True)
class Container:
    client: Optional[ApiClient]

    visits_repo: VisitRepository
    holidays_repo: HolidayStore

    holiday_registry: HolidayRegistry
    attendance_service: AttendanceService
    export_service: AttendanceExportService
    date_filter: DateFilterSetting


def build_services(
    *,
    visits_repo: VisitRepository,
    holidays_repo: HolidayStore,
    client: Optional[ApiClient] = None,
    today_window: str = DEFAULT_TODAY_FETCH_WINDOW,
    default_filter: Optional[dict] = None,
    **service_kwargs,
) -> Container:
    holiday_registry = HolidayRegistry(holidays_repo)
    attendance_service = AttendanceService(
        visits_repo,
        holiday_registry,
        aggregator=AttendanceAggregator(weekend_policy=SundayWeekendPolicy()),
        today_window=today_window,
        **service_kwargs,
    )
    date_filter = DateFilterSetting(
        selector_from_params(default_filter or {}, default=DateRangeSelector.today())
    )

    return Container(
        client=client,
        visits_repo=visits_repo,
        holidays_repo=holidays_repo,
        holiday_registry=holiday_registry,
        attendance_service=attendance_service,
        export_service=AttendanceExportService(),
        date_filter=date_filter,
    )


def build_container(
    *,
    api_config: dict,
    today_window: str = DEFAULT_TODAY_FETCH_WINDOW,
    default_filter: Optional[dict] = None,
) -> Container:
    config = ApiConfig(
        base_url=str(api_config["base_url"]),
        access_token=str(api_config.get("access_token", "")),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT_SECONDS)),
    )
    client = ApiClient(config)

    return build_services(
        visits_repo=HttpVisitRepository(client),
        holidays_repo=HttpHolidayRepository(client),
        client=client,
        today_window=today_window,
        default_filter=default_filter,
    )
