from __future__ import annotations

from typing import Protocol


class AuthRepository(Protocol):
    """Backend calls for admin accounts.

    Services depend on this interface so tests can swap in an in-memory fake.
    """

    def login(self, *, email: str, password: str) -> dict:
        raise NotImplementedError

    def create_sub_admin(self, body: dict, *, token: str | None = None) -> dict:
        raise NotImplementedError
