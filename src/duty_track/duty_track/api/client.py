from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT
from ..core.exceptions import ApiError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_REQUEST_TIMEOUT


@dataclass(frozen=True)
class ApiResponse:
    status_code: int
    data: Any

    @property
    def success(self) -> bool:
        return isinstance(self.data, dict) and bool(self.data.get("success"))


def error_message(data: Any, default: str) -> str:
    """Pull the backend's ``message``/``error`` text out of a response body."""
    if isinstance(data, dict):
        return str(data.get("message") or data.get("error") or default)
    return default


class BackendClient:
    """Thin wrapper around the Duty Track REST backend.

    One ``requests.Session`` is shared by every repository. The bearer token is
    attached per call because each Flask request carries its own session.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._http = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str, *, token: Optional[str] = None) -> ApiResponse:
        return self.request("GET", path, token=token)

    def post(self, path: str, json: Any = None, *, token: Optional[str] = None) -> ApiResponse:
        return self.request("POST", path, json=json, token=token)

    def delete(self, path: str, *, token: Optional[str] = None) -> ApiResponse:
        return self.request("DELETE", path, token=token)

    def request(self, method: str, path: str, *, json: Any = None, token: Optional[str] = None) -> ApiResponse:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        url = self.url(path)
        try:
            res = self._http.request(method, url, json=json, headers=headers, timeout=self._config.timeout)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError("Could not reach the server") from e

        try:
            data = res.json()
        except ValueError:
            data = None

        if res.status_code >= 400:
            backend_message = error_message(data, "") or None
            message = backend_message or "unexpected error"
            logger.warning("%s %s -> %s %s", method, url, res.status_code, message)
            raise ApiError(message, res.status_code, backend_message=backend_message)

        return ApiResponse(status_code=res.status_code, data=data)
