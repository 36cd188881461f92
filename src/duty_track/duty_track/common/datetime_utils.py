from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Tuple


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_ddmmyyyy(value: str) -> Optional[date]:
    try:
        day, month, year = (int(p) for p in value.split("-"))
        return date(year, month, day)
    except (TypeError, ValueError):
        return None


def hour_24(time_str: str) -> Optional[int]:
    """Hour (0-23) of a ``HH:MM AM/PM`` string, or None if it can't be read."""
    parts = (time_str or "").strip().split(" ")
    if len(parts) < 2:
        return None

    time_part, ampm = parts[0], parts[1].upper()
    try:
        hour = int(time_part.split(":")[0])
    except ValueError:
        return None

    if ampm == "PM" and hour != 12:
        hour += 12
    elif ampm == "AM" and hour == 12:
        hour = 0
    return hour


def split_scanned_on(value: str) -> Tuple[str, str]:
    """Split ``DD-MM-YYYY HH:MM AM/PM`` into its date and time parts."""
    parts = (value or "").split(" ")
    return parts[0], " ".join(parts[1:])


def parse_scanned_on(value: str) -> Optional[Tuple[date, Optional[int]]]:
    """Scan date and 24h hour of a ``scannedOn`` value.

    Returns None when the date part is malformed. The hour is None when the
    time part is missing or unreadable.
    """
    if not value:
        return None
    date_part, time_part = split_scanned_on(value)
    scan_date = parse_ddmmyyyy(date_part)
    if scan_date is None:
        return None
    return scan_date, hour_24(time_part)
