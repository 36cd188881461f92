from __future__ import annotations

from dataclasses import dataclass

from .model import ScanFilter
from .predicates.base import ScanPredicate
from .predicates.date_predicate import DateRangePredicate
from .predicates.station_predicate import StationPredicate
from .predicates.time_phase_predicate import TimePhasePredicate


@dataclass
class ScanPredicateFactory:
    """Factory Pattern: build the predicates a filter asks for, cheapest first."""

    def for_filter(self, scan_filter: ScanFilter) -> list[ScanPredicate]:
        predicates: list[ScanPredicate] = []
        if scan_filter.police_station:
            predicates.append(StationPredicate(scan_filter.police_station))
        if scan_filter.start_date or scan_filter.end_date:
            predicates.append(DateRangePredicate(scan_filter.start_date, scan_filter.end_date))
        if scan_filter.time_phase:
            predicates.append(TimePhasePredicate(scan_filter.time_phase))
        return predicates
