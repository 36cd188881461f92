from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Iterable, Sequence

_ISO_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}T")


def to_title_case(key: str) -> str:
    """``policeStation`` -> ``Police Station``; ``is_scanned`` -> ``Is Scanned``."""
    if not key:
        return ""
    spaced = re.sub(r"([A-Z])", r" \1", key)
    spaced = re.sub(r"[_-]", " ", spaced).strip()
    return " ".join(word[:1].upper() + word[1:] for word in spaced.split(" "))


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if value is None:
        return "N/A"
    if isinstance(value, str) and _ISO_PREFIX.match(value):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone()
        return parsed.strftime("%d/%m/%Y, %I:%M:%S %p")
    return str(value)


def visible_columns(rows: Sequence[dict], excluded: Iterable[str] = ()) -> list[str]:
    """Column keys taken from the first row, minus the excluded ones."""
    if not rows:
        return []
    excluded = set(excluded)
    return [k for k in rows[0].keys() if k not in excluded]


def row_key(item: dict, index: int) -> str:
    """Backend id (``id`` or ``_id``), else the position in the unfiltered list."""
    key = item.get("id")
    if key in (None, ""):
        key = item.get("_id")
    return str(key) if key not in (None, "") else str(index)
