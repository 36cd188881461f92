from __future__ import annotations

from .base import ScanPredicate


class StationPredicate(ScanPredicate):
    def __init__(self, police_station: str):
        self._station = police_station

    def matches(self, item: dict) -> bool:
        return item.get("policeStation") == self._station
