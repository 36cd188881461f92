from datetime import date

import pytest

from src.duty_track.duty_track.dashboard.factory import ScanPredicateFactory
from src.duty_track.duty_track.dashboard.filters import apply_filters, matches_search, scan_matches, unique_police_stations
from src.duty_track.duty_track.dashboard.model import ScanFilter, phase_by_label
from src.duty_track.duty_track.dashboard.predicates.date_predicate import DateRangePredicate
from src.duty_track.duty_track.dashboard.predicates.station_predicate import StationPredicate
from src.duty_track.duty_track.dashboard.predicates.time_phase_predicate import TimePhasePredicate, is_time_in_phase
from src.duty_track.duty_track.persons.model import Person

NIGHT_2 = phase_by_label("Night Phase 2 (9PM - 12AM)")
DAY_1 = phase_by_label("Day Phase 1 (6AM - 9AM)")

RAVI = Person(id=1, name="Ravi Kumar", pno_no="101")
SITA = Person(id=2, name="Sita", pno_no="202")
MOHAN = Person(id=3, name="Mohan", pno_no="303")

QR_MAP = {
    "101": [
        {"scannedOn": "05-03-2024 07:30 AM", "policeStation": "Shamli"},
        {"scannedOn": "06-03-2024 10:15 PM", "policeStation": "Kairana"},
    ],
    "202": [{"scannedOn": "07-03-2024 11:59 PM", "policeStation": "Shamli"}],
    "303": [],
}


@pytest.mark.parametrize(
    "time_str, expected",
    [("09:00 PM", True), ("11:59 PM", True), ("12:00 AM", False), ("08:59 PM", False), ("", False)],
)
def test_night_phase_wraps_midnight(time_str, expected):
    assert NIGHT_2.wraps_midnight
    assert is_time_in_phase(time_str, NIGHT_2) is expected


def test_day_phase_end_is_exclusive():
    assert is_time_in_phase("06:00 AM", DAY_1)
    assert not is_time_in_phase("09:00 AM", DAY_1)


def test_time_phase_passes_scans_without_time():
    assert TimePhasePredicate(DAY_1).matches({"scannedOn": "05-03-2024"})


def test_date_predicate_single_bound_is_exact_day():
    start_only = DateRangePredicate(date(2024, 3, 5), None)
    end_only = DateRangePredicate(None, date(2024, 3, 6))

    assert start_only.matches({"scannedOn": "05-03-2024 07:30 AM"})
    assert not start_only.matches({"scannedOn": "06-03-2024 07:30 AM"})
    assert end_only.matches({"scannedOn": "06-03-2024 07:30 AM"})
    assert not end_only.matches({"scannedOn": "05-03-2024 07:30 AM"})


def test_date_predicate_range_is_inclusive_and_rejects_malformed():
    both = DateRangePredicate(date(2024, 3, 5), date(2024, 3, 6))

    assert both.matches({"scannedOn": "05-03-2024 01:00 AM"})
    assert both.matches({"scannedOn": "06-03-2024 11:00 PM"})
    assert not both.matches({"scannedOn": "07-03-2024 01:00 AM"})
    assert not both.matches({"scannedOn": "2024-03-05 01:00 AM"})


def test_factory_builds_requested_predicates():
    predicates = ScanPredicateFactory().for_filter(
        ScanFilter(start_date=date(2024, 3, 5), time_phase=DAY_1, police_station="Shamli")
    )
    assert [type(p).__name__ for p in predicates] == ["StationPredicate", "DateRangePredicate", "TimePhasePredicate"]
    assert ScanPredicateFactory().for_filter(ScanFilter(search="x")) == []


def test_scan_without_scanned_on_never_matches():
    assert not scan_matches({"policeStation": "Shamli"}, [StationPredicate("Shamli")])
    assert scan_matches({"scannedOn": "05-03-2024", "policeStation": "Shamli"}, [])


def test_no_scan_filters_keeps_everyone():
    assert apply_filters([RAVI, SITA, MOHAN], QR_MAP, ScanFilter()) == [RAVI, SITA, MOHAN]


def test_station_filter_needs_one_matching_scan():
    result = apply_filters([RAVI, SITA, MOHAN], QR_MAP, ScanFilter(police_station="Kairana"))
    assert result == [RAVI]


def test_all_conditions_apply_to_the_same_scan():
    scan_filter = ScanFilter(police_station="Shamli", time_phase=NIGHT_2)
    assert apply_filters([RAVI, SITA, MOHAN], QR_MAP, scan_filter) == [SITA]


def test_search_matches_name_or_pno():
    assert matches_search(RAVI, "kumar")
    assert matches_search(SITA, "20")
    assert not matches_search(MOHAN, "xyz")
    assert apply_filters([RAVI, SITA, MOHAN], QR_MAP, ScanFilter(search="303")) == [MOHAN]


def test_unique_police_stations_sorted():
    assert unique_police_stations(QR_MAP) == ["Kairana", "Shamli"]
