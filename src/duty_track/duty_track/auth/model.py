from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional

from ..core.enums import SubAdminRole


@dataclass(frozen=True)
class AdminProfile:
    """The ``tokenPayload`` the backend hands back on login."""

    id: Any
    email: str
    name: str

    @classmethod
    def from_payload(cls, payload: Optional[dict]) -> "AdminProfile":
        payload = payload or {}
        return cls(
            id=payload.get("id"),
            email=str(payload.get("email") or ""),
            name=str(payload.get("name") or ""),
        )

    def to_payload(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class AuthSession:
    token: str
    profile: AdminProfile


@dataclass(frozen=True)
class SubAdmin:
    name: str
    role: SubAdminRole
    mobile_no: str
    password: str

    def to_body(self) -> dict:
        return {
            "name": self.name,
            "role": self.role.value,
            "mobileNo": self.mobile_no,
            "password": self.password,
        }
