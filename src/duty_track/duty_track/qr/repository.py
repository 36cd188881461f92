from __future__ import annotations

from typing import Any, Protocol, Sequence


class QRRepository(Protocol):
    def create(self, body: dict, *, token: str | None = None) -> dict:
        raise NotImplementedError

    def create_bulk(self, bodies: Sequence[dict], *, token: str | None = None) -> dict:
        raise NotImplementedError

    def get_for_pno(self, pno_no: str, *, token: str | None = None) -> Sequence[dict]:
        raise NotImplementedError

    def get_all(self, *, token: str | None = None) -> Sequence[dict]:
        raise NotImplementedError

    def delete(self, qr_id: Any, *, token: str | None = None) -> dict:
        raise NotImplementedError
