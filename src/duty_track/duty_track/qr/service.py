from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from ..common.validators import require_non_empty, validate_latitude, validate_longitude
from ..core.exceptions import ApiError, ValidationError
from .model import QRDataItem, QRLocation
from .repository import QRRepository
from .table import row_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteSummary:
    deleted: list = field(default_factory=list)
    failed: list = field(default_factory=list)

    @property
    def message(self) -> str:
        if not self.failed:
            return f"{len(self.deleted)} QR code(s) deleted successfully!"
        return f"Deleted {len(self.deleted)} QR code(s), {len(self.failed)} failed."


def build_location(
    *,
    latitude: str,
    longitude: str,
    police_station: str,
    duty_point: str = "",
    cug: Any = None,
) -> QRLocation:
    """Validate the single-entry form and turn it into a QR payload."""
    try:
        lat = validate_latitude(latitude)
        long = validate_longitude(longitude)
        station = require_non_empty(police_station, "Police Station")
    except ValidationError as e:
        raise ValidationError("Please correct the errors and fill all fields.") from e

    cug_value: Optional[int] = None
    if cug not in (None, ""):
        try:
            cug_value = int(float(cug))
        except (TypeError, ValueError):
            raise ValidationError("CUG Number must be a number")

    return QRLocation(
        latitude=lat,
        longitude=long,
        police_station=station,
        duty_point=(duty_point or "").strip(),
        cug=cug_value,
    )


class QRService:
    """Use case: create, list, search and delete duty-point QR codes.

    ``cached_all`` holds the last ``/qr/get-all`` response.
    """

    def __init__(self, qr: QRRepository):
        self._qr = qr
        self._all: list[dict] = []

    @property
    def cached_all(self) -> list[dict]:
        return list(self._all)

    def create(self, location: QRLocation, *, token: Optional[str] = None) -> dict:
        data = self._qr.create(location.to_body(), token=token)
        logger.info("Created QR for %s / %s", location.police_station, location.duty_point or "-")
        return data

    def create_bulk(self, locations: Sequence[QRLocation], *, token: Optional[str] = None) -> dict:
        if not locations:
            raise ValidationError("No valid data found.")
        data = self._qr.create_bulk([loc.to_body() for loc in locations], token=token)
        logger.info("Created %d QR codes in bulk", len(locations))
        return data

    def get_history(self, pno_no: str, *, token: Optional[str] = None) -> list[dict]:
        """Scan history of one PNO; an empty list when the call fails."""
        try:
            return [r for r in self._qr.get_for_pno(pno_no, token=token) if isinstance(r, dict)]
        except ApiError:
            logger.exception("Error fetching QR data for PNO %s", pno_no)
            return []

    def get_all(self, *, token: Optional[str] = None) -> Optional[list[dict]]:
        try:
            rows = self._qr.get_all(token=token)
        except ApiError:
            logger.exception("Error fetching QR codes")
            return None
        self._all = [r for r in rows if isinstance(r, dict)]
        return self.cached_all

    @staticmethod
    def search_by_station(items: Sequence[dict], term: str) -> list[dict]:
        term = (term or "").strip().lower()
        if not term:
            return list(items or [])

        out = []
        for item in items or []:
            station = item.get("policeStation") or item.get("PoliceStation")
            if station and term in str(station).lower():
                out.append(item)
        return out

    def selected_rows(self, keys: Iterable[str], items: Optional[Sequence[dict]] = None) -> list[tuple[str, dict]]:
        """``(row key, item)`` for each selected row, in table order."""
        items = self._all if items is None else items
        wanted = {str(k) for k in keys}
        return [(row_key(item, i), item) for i, item in enumerate(items) if row_key(item, i) in wanted]

    def locations_for(self, keys: Iterable[str], items: Optional[Sequence[dict]] = None) -> list[QRLocation]:
        """Printable payloads for the selected rows, in table order."""
        return [QRLocation.from_item(item) for _, item in self.selected_rows(keys, items)]

    def delete_many(self, keys: Iterable[str], *, token: Optional[str] = None) -> DeleteSummary:
        """Delete the selected rows by their backend id.

        Keys that no longer match a cached row, and rows without an id, are
        reported as failed without calling the backend.
        """
        keys = [str(k) for k in keys]
        rows = self.selected_rows(keys)
        found = {key for key, _ in rows}
        failed: list = [k for k in keys if k not in found]
        deleted: list = []

        for key, item in rows:
            qr_id = QRDataItem.from_dict(item).id
            if qr_id in (None, ""):
                logger.error("QR row %s has no id; skipping delete", key)
                failed.append(key)
                continue
            try:
                self._qr.delete(qr_id, token=token)
                deleted.append(qr_id)
            except ApiError:
                logger.exception("Error deleting QR %s", qr_id)
                failed.append(key)

        gone = {str(i) for i in deleted}
        self._all = [r for r in self._all if str(QRDataItem.from_dict(r).id) not in gone]
        return DeleteSummary(deleted=deleted, failed=failed)
