from __future__ import annotations

from ..api.client import BackendClient


class HttpAuthRepository:
    def __init__(self, client: BackendClient):
        self._client = client

    def login(self, *, email: str, password: str) -> dict:
        res = self._client.post("/admin/login", json={"email": email, "password": password})
        return res.data or {}

    def create_sub_admin(self, body: dict, *, token: str | None = None) -> dict:
        res = self._client.post("/subAdmin/create", json=body, token=token)
        return res.data or {}
