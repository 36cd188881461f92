import base64

from src.duty_track.duty_track.qr.model import QRLocation
from src.duty_track.duty_track.qr.render import pdf_with_qr_codes, qr_data_url, qr_image, qr_png
from src.duty_track.duty_track.qr.table import format_value, row_key, to_title_case, visible_columns

LOCATION = QRLocation("29.4", "77.3", "Shamli", "Gate", 9876)


def test_qr_image_is_square_at_requested_width():
    img = qr_image(LOCATION, width=128)
    assert img.size == (128, 128)


def test_png_and_data_url():
    png = qr_png(LOCATION)
    assert png.startswith(b"\x89PNG")

    url = qr_data_url(LOCATION)
    assert url.startswith("data:image/png;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == png


def test_payload_is_compact_json():
    assert LOCATION.to_json() == (
        '{"lattitude":"29.4","longitude":"77.3","policeStation":"Shamli","dutyPoint":"Gate","cug":9876}'
    )


def test_pdf_spans_pages():
    pdf = pdf_with_qr_codes([LOCATION] * 13)
    assert pdf.startswith(b"%PDF")
    assert b"/Count 2" in pdf


def test_empty_pdf_still_renders():
    assert pdf_with_qr_codes([]).startswith(b"%PDF")


def test_table_helpers():
    assert to_title_case("policeStation") == "Police Station"
    assert to_title_case("is_scanned") == "Is Scanned"
    assert format_value(True) == "Yes"
    assert format_value(None) == "N/A"
    assert format_value("Shamli") == "Shamli"
    assert format_value("2024-03-05T10:00:00") == "05/03/2024, 10:00:00 AM"
    assert visible_columns([{"id": 1, "a": 2, "createdAt": 3}], ["id", "createdAt"]) == ["a"]
    assert visible_columns([], ["id"]) == []
    assert row_key({"id": 5}, 0) == "5"
    assert row_key({}, 3) == "3"
    assert row_key({"_id": "abc"}, 0) == "abc"
    assert row_key({"id": "", "_id": "def"}, 1) == "def"
