from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..persons.model import Person


@dataclass(frozen=True)
class TimePhase:
    """A three-hour duty window; 24h hours, ``end_hour`` exclusive."""

    label: str
    start_hour: int
    end_hour: int

    @property
    def wraps_midnight(self) -> bool:
        return self.start_hour >= self.end_hour


TIME_PHASES = [
    TimePhase("Day Phase 1 (6AM - 9AM)", 6, 9),
    TimePhase("Day Phase 2 (9AM - 12PM)", 9, 12),
    TimePhase("Day Phase 3 (12PM - 3PM)", 12, 15),
    TimePhase("Day Phase 4 (3PM - 6PM)", 15, 18),
    TimePhase("Night Phase 1 (6PM - 9PM)", 18, 21),
    TimePhase("Night Phase 2 (9PM - 12AM)", 21, 0),
    TimePhase("Night Phase 3 (12AM - 3AM)", 0, 3),
    TimePhase("Night Phase 4 (3AM - 6AM)", 3, 6),
]


def phase_by_label(label: Optional[str]) -> Optional[TimePhase]:
    return next((p for p in TIME_PHASES if p.label == label), None)


@dataclass(frozen=True)
class ScanFilter:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    time_phase: Optional[TimePhase] = None
    police_station: str = ""
    search: str = ""

    @property
    def needs_scan_filtering(self) -> bool:
        return bool(self.start_date or self.end_date or self.time_phase or self.police_station)


@dataclass
class DashboardData:
    persons: list[Person] = field(default_factory=list)
    qr_map: dict[str, list[dict]] = field(default_factory=dict)
    address_map: dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None
