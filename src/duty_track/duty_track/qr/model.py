from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class QRLocation:
    """Payload posted to ``/qr/create`` and encoded into the QR image.

    ``lattitude`` keeps the backend's spelling on the wire.
    """

    latitude: str
    longitude: str
    police_station: str
    duty_point: str = ""
    cug: Optional[int] = None

    def to_body(self) -> dict:
        return {
            "lattitude": self.latitude,
            "longitude": self.longitude,
            "policeStation": self.police_station,
            "dutyPoint": self.duty_point,
            "cug": self.cug,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_body(), separators=(",", ":"))

    @classmethod
    def from_item(cls, item: dict) -> "QRLocation":
        """Rebuild the printable payload from a QR row (any key casing)."""
        cug = item.get("cug") or item.get("CUG")
        try:
            cug = int(cug) if cug not in (None, "") else None
        except (TypeError, ValueError):
            cug = None
        return cls(
            latitude=str(item.get("lattitude") or item.get("latitude") or ""),
            longitude=str(item.get("longitude") or item.get("Longitude") or ""),
            police_station=str(item.get("policeStation") or item.get("PoliceStation") or ""),
            duty_point=str(item.get("dutyPoint") or item.get("DutyPoint") or ""),
            cug=cug,
        )


@dataclass(frozen=True)
class QRDataItem:
    """A QR code record; ``scanned_on`` is ``DD-MM-YYYY HH:MM AM/PM``."""

    id: Any
    latitude: str
    longitude: str
    police_station: str
    duty_point: str = ""
    is_scanned: bool = False
    scanned_on: str = ""
    scanned_by: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, raw: dict) -> "QRDataItem":
        return cls(
            id=raw.get("id") or raw.get("_id"),
            latitude=str(raw.get("lattitude") or raw.get("latitude") or ""),
            longitude=str(raw.get("longitude") or ""),
            police_station=str(raw.get("policeStation") or ""),
            duty_point=str(raw.get("dutyPoint") or ""),
            is_scanned=bool(raw.get("isScanned")),
            scanned_on=str(raw.get("scannedOn") or ""),
            scanned_by=str(raw.get("scannedBy") or ""),
            created_at=str(raw.get("createdAt") or ""),
            updated_at=str(raw.get("updatedAt") or ""),
        )
