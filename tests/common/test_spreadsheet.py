import io

import pandas as pd
import pytest

from src.duty_track.duty_track.common.spreadsheet import cell, read_first_sheet
from src.duty_track.duty_track.core.exceptions import ValidationError


def _xlsx(frame: pd.DataFrame) -> io.BytesIO:
    buf = io.BytesIO()
    frame.to_excel(buf, index=False)
    buf.seek(0)
    return buf


def test_reads_first_sheet_as_strings():
    df = read_first_sheet(_xlsx(pd.DataFrame({" name ": ["Ram", None], "pnoNo": [101, 102]})), "people.xlsx")

    assert list(df.columns) == ["name", "pnoNo"]
    assert df.iloc[0]["pnoNo"] == "101"
    assert df.iloc[1]["name"] == ""


def test_reads_csv_by_extension():
    df = read_first_sheet(io.BytesIO(b"a,b\n1,2\n"), "rows.csv")
    assert df.iloc[0]["b"] == "2"


def test_unreadable_file():
    with pytest.raises(ValidationError, match="Error reading file."):
        read_first_sheet(io.BytesIO(b"not a workbook"), "broken.xlsx")


def test_cell_picks_first_non_empty_alias():
    row = pd.Series({"Lattitude": "", "latitude": "29.4"})
    assert cell(row, "Lattitude", "latitude") == "29.4"
    assert cell(row, "missing") == ""
