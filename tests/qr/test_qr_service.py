from __future__ import annotations

import io

import pandas as pd
import pytest

from src.duty_track.duty_track.core.exceptions import ApiError, ValidationError
from src.duty_track.duty_track.qr.importer import NO_VALID_ROWS, read_location_rows
from src.duty_track.duty_track.qr.model import QRDataItem, QRLocation
from src.duty_track.duty_track.qr.service import QRService, build_location


class FakeQRRepo:
    def __init__(self, items=None, history=None, fail_delete=()):
        self.items = items or []
        self.history = history or {}
        self.fail_delete = {str(i) for i in fail_delete}
        self.created: list = []
        self.deleted: list = []

    def create(self, body, *, token=None):
        self.created.append(body)
        return {"success": True}

    def create_bulk(self, bodies, *, token=None):
        self.created.extend(bodies)
        return {"success": True}

    def get_for_pno(self, pno_no, *, token=None):
        if pno_no not in self.history:
            raise ApiError("not found", 404)
        return self.history[pno_no]

    def get_all(self, *, token=None):
        return self.items

    def delete(self, qr_id, *, token=None):
        if str(qr_id) in self.fail_delete:
            raise ApiError("nope", 500)
        self.deleted.append(qr_id)
        return {"success": True}


ITEMS = [
    {"id": "a1", "lattitude": "29.1", "longitude": "77.1", "policeStation": "Shamli", "dutyPoint": "Gate"},
    {"id": "b2", "lattitude": "29.2", "longitude": "77.2", "policeStation": "Kairana"},
    {"lattitude": "29.3", "longitude": "77.3", "PoliceStation": "Adarsh Mandi", "cug": "9876"},
]


def test_build_location_normalises_fields():
    loc = build_location(latitude=" 29.4 ", longitude="77.3", police_station=" Shamli ", duty_point=" Gate ", cug="9876")

    assert loc == QRLocation("29.4", "77.3", "Shamli", "Gate", 9876)
    assert loc.to_body() == {
        "lattitude": "29.4",
        "longitude": "77.3",
        "policeStation": "Shamli",
        "dutyPoint": "Gate",
        "cug": 9876,
    }


def test_build_location_rejects_bad_input():
    with pytest.raises(ValidationError, match="Please correct the errors"):
        build_location(latitude="95", longitude="77", police_station="Shamli")
    with pytest.raises(ValidationError, match="Please correct the errors"):
        build_location(latitude="29", longitude="77", police_station="")
    with pytest.raises(ValidationError, match="CUG Number must be a number"):
        build_location(latitude="29", longitude="77", police_station="Shamli", cug="abc")


def test_create_and_bulk_post_bodies():
    repo = FakeQRRepo()
    service = QRService(repo)

    service.create(QRLocation("1", "2", "S"))
    service.create_bulk([QRLocation("3", "4", "T", cug=5)])

    assert [b["lattitude"] for b in repo.created] == ["1", "3"]
    with pytest.raises(ValidationError):
        service.create_bulk([])


def test_history_failure_is_empty():
    service = QRService(FakeQRRepo(history={"101": [{"scannedOn": "01-01-2024 10:00 AM"}]}))

    assert len(service.get_history("101")) == 1
    assert service.get_history("999") == []


def test_search_by_station_is_case_insensitive_substring():
    assert [i.get("id") for i in QRService.search_by_station(ITEMS, "kai")] == ["b2"]
    assert len(QRService.search_by_station(ITEMS, "MANDI")) == 1
    assert QRService.search_by_station(ITEMS, "  ") == ITEMS


def test_locations_for_uses_id_or_index_keys():
    service = QRService(FakeQRRepo(items=ITEMS))
    service.get_all()

    locations = service.locations_for(["b2", "2"])

    assert [l.police_station for l in locations] == ["Kairana", "Adarsh Mandi"]
    assert locations[1].cug == 9876


def test_delete_many_reports_partial_failure_and_updates_cache():
    repo = FakeQRRepo(items=ITEMS, fail_delete=["b2"])
    service = QRService(repo)
    service.get_all()

    summary = service.delete_many(["a1", "b2"])

    assert summary.deleted == ["a1"]
    assert summary.message == "Deleted 1 QR code(s), 1 failed."
    assert [i.get("id") for i in service.cached_all] == ["b2", None]


def test_delete_summary_all_ok():
    service = QRService(FakeQRRepo(items=ITEMS[:2]))
    service.get_all()

    summary = service.delete_many(["a1", "b2"])

    assert summary.message == "2 QR code(s) deleted successfully!"
    assert service.cached_all == []


def test_delete_many_sends_underscore_ids_not_row_positions():
    repo = FakeQRRepo(items=[{"_id": "abc", "policeStation": "Shamli"}, {"_id": "def", "policeStation": "Babri"}])
    service = QRService(repo)
    service.get_all()

    summary = service.delete_many(["def"])

    assert repo.deleted == ["def"]
    assert summary.deleted == ["def"]
    assert [i["_id"] for i in service.cached_all] == ["abc"]


def test_delete_many_skips_rows_without_id_and_unknown_keys():
    repo = FakeQRRepo(items=ITEMS)
    service = QRService(repo)
    service.get_all()

    summary = service.delete_many(["2", "zzz"])

    assert repo.deleted == []
    assert sorted(summary.failed) == ["2", "zzz"]
    assert summary.message == "Deleted 0 QR code(s), 2 failed."
    assert len(service.cached_all) == 3


def test_data_item_from_dict():
    item = QRDataItem.from_dict({"_id": "z", "lattitude": "1", "isScanned": 1, "scannedOn": "02-01-2024 01:00 PM"})
    assert item.id == "z"
    assert item.is_scanned is True
    assert item.scanned_on.startswith("02-01-2024")


def test_location_importer_accepts_header_variants():
    frame = pd.DataFrame(
        {
            "Lattitude": ["29.1", "29.2", ""],
            "Longitude": ["77.1", "77.2", "77.3"],
            "Police Station": ["Shamli", "Kairana", "Babri"],
            "Duty Point": ["Gate", "", "Market"],
            "CUG": ["9876", "0", "1234"],
        }
    )
    buf = io.BytesIO()
    frame.to_excel(buf, index=False)
    buf.seek(0)

    rows = read_location_rows(buf, "points.xlsx")

    assert rows == [QRLocation("29.1", "77.1", "Shamli", "Gate", 9876)]


def test_location_importer_without_valid_rows():
    with pytest.raises(ValidationError) as exc:
        read_location_rows(io.BytesIO(b"latitude,longitude\n1,2\n"), "points.csv")
    assert str(exc.value) == NO_VALID_ROWS
