from __future__ import annotations

from typing import Optional

from ..client.api_client import ApiClient
from .model import Executive, VisitRecord
from .parsing import parse_executives_payload, parse_visits_payload


class HttpVisitRepository:
    def __init__(self, client: ApiClient):
        self._client = client

    def list_executives(self) -> list[Executive]:
        payload = self._client.get_json("/api/admin/visit-report/filters")
        return parse_executives_payload(payload)

    def list_visits(self, *, date_filter: str, executive_id: Optional[str] = None) -> list[VisitRecord]:
        params = {"dateFilter": date_filter}
        if executive_id:
            params["executiveId"] = executive_id
        payload = self._client.get_json("/api/admin/visit-report/data", params=params, no_cache=True)
        return parse_visits_payload(payload)
