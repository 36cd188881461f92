from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def _coordinate_error(value, field_name: str, limit: int) -> str:
    if value is None or str(value).strip() == "":
        return f"{field_name} is required"
    try:
        num = float(value)
    except (TypeError, ValueError):
        return f"{field_name} must be a number"
    if num != num:
        return f"{field_name} must be a number"
    if num < -limit or num > limit:
        return f"{field_name} must be between -{limit} and {limit}"
    return ""


def latitude_error(value) -> str:
    """Empty string when valid, else the message shown under the field."""
    return _coordinate_error(value, "Latitude", 90)


def longitude_error(value) -> str:
    return _coordinate_error(value, "Longitude", 180)


def validate_latitude(value) -> str:
    error = latitude_error(value)
    if error:
        raise ValidationError(error)
    return str(value).strip()


def validate_longitude(value) -> str:
    error = longitude_error(value)
    if error:
        raise ValidationError(error)
    return str(value).strip()
