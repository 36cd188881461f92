from __future__ import annotations

import logging
from typing import IO

import pandas as pd

from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def read_first_sheet(stream: IO[bytes], filename: str = "") -> pd.DataFrame:
    """Load the first sheet of an Excel workbook (or a CSV) as strings.

    Empty cells come back as ``""`` so callers can test values with ``strip()``.
    """
    try:
        if filename.lower().endswith(".csv"):
            df = pd.read_csv(stream, dtype=str)
        else:
            df = pd.read_excel(stream, sheet_name=0, dtype=str)
    except Exception as e:
        logger.exception("Error reading spreadsheet %s", filename or "<upload>")
        raise ValidationError("Error reading file.") from e

    if df.empty and len(df.columns) == 0:
        raise ValidationError("File is empty.")

    df.columns = [str(c).strip() for c in df.columns]
    return df.fillna("")


def cell(row, *names: str) -> str:
    """First non-empty value among ``names`` in a DataFrame row."""
    for name in names:
        if name in row and str(row[name]).strip():
            return str(row[name]).strip()
    return ""
