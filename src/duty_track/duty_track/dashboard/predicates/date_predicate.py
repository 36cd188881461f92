from __future__ import annotations

from datetime import date
from typing import Optional

from ...common.datetime_utils import parse_scanned_on
from .base import ScanPredicate


class DateRangePredicate(ScanPredicate):
    """Inclusive date range on ``scannedOn``.

    With only one bound set the scan must fall on exactly that day.
    """

    def __init__(self, start: Optional[date], end: Optional[date]):
        self._start = start
        self._end = end

    def matches(self, item: dict) -> bool:
        parsed = parse_scanned_on(item.get("scannedOn") or "")
        if parsed is None:
            return False
        scan_date, _ = parsed

        if self._start and not self._end:
            return scan_date == self._start
        if self._end and not self._start:
            return scan_date == self._end
        return self._start <= scan_date <= self._end
