from __future__ import annotations

from typing import Any, Protocol, Sequence


class PersonRepository(Protocol):
    def list_for_admin(self, admin_id: str, *, token: str | None = None) -> Sequence[dict]:
        raise NotImplementedError

    def signup(self, admin_id: str, body: Any, *, token: str | None = None) -> tuple[int, dict]:
        """Create one person (dict body) or many (list body).

        Returns the HTTP status with the response body; the backend answers
        207 when only part of a bulk signup went through.
        """

        raise NotImplementedError
