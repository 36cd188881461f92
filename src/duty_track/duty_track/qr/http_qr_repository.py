from __future__ import annotations

from typing import Any, Sequence

from ..api.client import BackendClient


def _data_list(body) -> list:
    if isinstance(body, dict):
        return list(body.get("data") or [])
    if isinstance(body, list):
        return body
    return []


class HttpQRRepository:
    def __init__(self, client: BackendClient):
        self._client = client

    def create(self, body: dict, *, token: str | None = None) -> dict:
        return self._client.post("/qr/create", json=body, token=token).data or {}

    def create_bulk(self, bodies: Sequence[dict], *, token: str | None = None) -> dict:
        return self._client.post("/qr/create/bulk", json=list(bodies), token=token).data or {}

    def get_for_pno(self, pno_no: str, *, token: str | None = None) -> Sequence[dict]:
        res = self._client.get(f"/qr/get/{pno_no}", token=token)
        if not res.success:
            return []
        return _data_list(res.data)

    def get_all(self, *, token: str | None = None) -> Sequence[dict]:
        return _data_list(self._client.get("/qr/get-all", token=token).data)

    def delete(self, qr_id: Any, *, token: str | None = None) -> dict:
        return self._client.delete(f"/qr/delete/{qr_id}", token=token).data or {}
