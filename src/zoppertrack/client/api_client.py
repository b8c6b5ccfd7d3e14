from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import ACCESS_TOKEN_COOKIE, DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import PayloadError, UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    access_token: str = ""
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS


class ApiClient:
    """JSON client for the ZopperTrack admin API.

    Note: One `requests.Session` is reused for all calls. Every failure
    (network error or non-2xx status) is raised as UpstreamError; no retries.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})
        if config.access_token:
            self._session.cookies.set(ACCESS_TOKEN_COOKIE, config.access_token)

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self._url(path)
        try:
            response = self._session.request(method, url, timeout=self._config.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise UpstreamError(f"Could not reach ZopperTrack API: {e}") from e

        if not response.ok:
            message = self._error_message(response)
            logger.error("%s %s -> %s: %s", method, url, response.status_code, message)
            raise UpstreamError(message, status_code=response.status_code)

        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        fallback = f"Request failed with status {response.status_code}"
        try:
            body = response.json()
        except ValueError:
            return fallback
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return fallback

    @staticmethod
    def _json(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise PayloadError("API response is not valid JSON") from e

    def get_json(self, path: str, *, params: Optional[dict] = None, no_cache: bool = False) -> Any:
        headers = None
        if no_cache:
            params = dict(params or {})
            params["_ts"] = str(int(time.time() * 1000))
            headers = {"Cache-Control": "no-cache", "Pragma": "no-cache"}
        return self._json(self._request("GET", path, params=params, headers=headers))

    def post_json(self, path: str, body: dict) -> Any:
        return self._json(self._request("POST", path, json=body))

    def delete(self, path: str) -> None:
        self._request("DELETE", path)

    def close(self) -> None:
        self._session.close()
