from __future__ import annotations

from typing import IO, Optional

from ..common.spreadsheet import cell, read_first_sheet
from ..core.exceptions import ValidationError
from .model import QRLocation

NO_VALID_ROWS = (
    "No valid data found. Ensure your columns are 'Lattitude', 'Longitude', 'Police Station', 'Duty Point'."
)


def _cug(value: str) -> Optional[int]:
    try:
        number = int(float(value))
    except (TypeError, ValueError):
        return None
    return number or None


def read_location_rows(stream: IO[bytes], filename: str = "") -> list[QRLocation]:
    """Map a duty-point sheet to QR payloads, dropping incomplete rows."""
    df = read_first_sheet(stream, filename)

    rows: list[QRLocation] = []
    for _, row in df.iterrows():
        location = QRLocation(
            latitude=cell(row, "Latitude", "latitude", "Lattitude", "lattitude"),
            longitude=cell(row, "Longitude", "longitude"),
            police_station=cell(row, "Police Station", "policeStation"),
            duty_point=cell(row, "Duty Point", "dutyPoint"),
            cug=_cug(cell(row, "cug", "CUG")),
        )
        if location.latitude and location.longitude and location.police_station and location.cug:
            rows.append(location)

    if not rows:
        raise ValidationError(NO_VALID_ROWS)
    return rows
