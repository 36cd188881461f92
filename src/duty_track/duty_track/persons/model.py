from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Person:
    """A duty-tracked individual as returned by ``/admin/get-users``."""

    id: Any
    name: str
    pno_no: str
    photos: list[str] = field(default_factory=list)
    co: Optional[str] = None
    police_station: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict) -> "Person":
        photos = raw.get("photos") or []
        if isinstance(photos, str):
            photos = [photos]
        return cls(
            id=raw.get("id") or raw.get("_id"),
            name=str(raw.get("name") or ""),
            pno_no=str(raw.get("pnoNo") or ""),
            photos=[str(p) for p in photos if p],
            co=raw.get("co"),
            police_station=raw.get("policeStation"),
        )


@dataclass(frozen=True)
class NewPerson:
    """Signup payload for one person."""

    name: str
    pno_no: str
    password: str
    co: str
    police_station: str

    def to_body(self) -> dict:
        return {
            "name": self.name,
            "pnoNo": self.pno_no,
            "password": self.password,
            "co": self.co,
            "policeStation": self.police_station,
        }


@dataclass(frozen=True)
class SignupOutcome:
    """What the admin is told after a signup call."""

    status_code: int
    message: str
    created: int = 0
    failed: int = 0
    errors: list = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return self.status_code == 207
