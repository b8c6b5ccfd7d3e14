from __future__ import annotations

from urllib.parse import quote

from ..client.api_client import ApiClient
from .model import Holiday
from .parsing import parse_created_holiday, parse_holidays_payload


class HttpHolidayRepository:
    def __init__(self, client: ApiClient):
        self._client = client

    def list_holidays(self) -> list[Holiday]:
        return parse_holidays_payload(self._client.get_json("/api/admin/holidays", no_cache=True))

    def create_holiday(self, *, date_key: str, name: str) -> Holiday:
        payload = self._client.post_json("/api/admin/holidays", {"date": date_key, "name": name})
        return parse_created_holiday(payload)

    def delete_holiday(self, holiday_id: str) -> None:
        self._client.delete(f"/api/admin/holidays/{quote(holiday_id, safe='')}")
