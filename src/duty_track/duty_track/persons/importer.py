from __future__ import annotations

from typing import IO

from ..common.spreadsheet import read_first_sheet
from ..core.exceptions import ValidationError
from .model import NewPerson

# Header names are matched exactly; "Password" is capitalised in the template sheet.
REQUIRED_COLUMNS = ["name", "pnoNo", "Password", "co", "policeStation"]


def read_person_rows(stream: IO[bytes], filename: str = "") -> list[NewPerson]:
    df = read_first_sheet(stream, filename)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValidationError(
            "Missing required columns: 'name', 'pnoNo', 'Password' (case-sensitive), 'co', or 'policeStation'."
        )

    rows: list[NewPerson] = []
    for _, row in df.iterrows():
        person = NewPerson(
            name=str(row["name"]).strip(),
            pno_no=str(row["pnoNo"]).strip(),
            password=str(row["Password"]).strip(),
            co=str(row["co"]).strip(),
            police_station=str(row["policeStation"]).strip(),
        )
        if person.name and person.pno_no and person.password:
            rows.append(person)

    if not rows:
        raise ValidationError("No valid user data found in the file.")
    return rows
