from __future__ import annotations

from typing import Mapping, Optional, Sequence

from ..persons.model import Person
from .factory import ScanPredicateFactory
from .model import ScanFilter
from .predicates.base import ScanPredicate


def scan_matches(item: dict, predicates: Sequence[ScanPredicate]) -> bool:
    if not item.get("scannedOn"):
        return False
    return all(p.matches(item) for p in predicates)


def matches_search(person: Person, query: str) -> bool:
    return query.lower() in person.name.lower() or query in person.pno_no


def apply_filters(
    persons: Sequence[Person],
    qr_map: Mapping[str, Sequence[dict]],
    scan_filter: ScanFilter,
    *,
    factory: Optional[ScanPredicateFactory] = None,
) -> list[Person]:
    """Persons with at least one matching scan, narrowed by the search text.

    Without any scan condition every person is kept; the search then matches
    the name case-insensitively or the PNO as a substring.
    """
    result = list(persons)

    if scan_filter.needs_scan_filtering:
        predicates = (factory or ScanPredicateFactory()).for_filter(scan_filter)
        matched = {
            pno_no
            for pno_no, scans in qr_map.items()
            if any(scan_matches(item, predicates) for item in scans or [])
        }
        result = [p for p in result if p.pno_no in matched]

    if scan_filter.search:
        result = [p for p in result if matches_search(p, scan_filter.search)]

    return result


def unique_police_stations(qr_map: Mapping[str, Sequence[dict]]) -> list[str]:
    stations = {
        item["policeStation"]
        for scans in qr_map.values()
        for item in scans or []
        if item.get("policeStation")
    }
    return sorted(stations)
