from __future__ import annotations

from typing import Any, Sequence

from ..api.client import BackendClient


class HttpPersonRepository:
    def __init__(self, client: BackendClient):
        self._client = client

    def list_for_admin(self, admin_id: str, *, token: str | None = None) -> Sequence[dict]:
        res = self._client.get(f"/admin/get-users/{admin_id}", token=token)
        data = (res.data or {}).get("data") if isinstance(res.data, dict) else None
        return list(data or [])

    def signup(self, admin_id: str, body: Any, *, token: str | None = None) -> tuple[int, dict]:
        res = self._client.post(f"/auth/signup/{admin_id}", json=body, token=token)
        return res.status_code, res.data if isinstance(res.data, dict) else {}
