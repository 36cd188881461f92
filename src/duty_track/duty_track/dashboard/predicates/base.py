from __future__ import annotations

from abc import ABC, abstractmethod


class ScanPredicate(ABC):
    """Strategy Pattern: one condition a scan record must satisfy."""

    @abstractmethod
    def matches(self, item: dict) -> bool:
        raise NotImplementedError
