# Reverse geocoding of scan coordinates via geocode.maps.co

from __future__ import annotations

import logging
from typing import Optional

import requests

from ..core.constants import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

REVERSE_URL = "https://geocode.maps.co/reverse"


def format_address(address: Optional[dict]) -> str:
    """``road, city|town|village, country`` with empty parts dropped."""
    address = address or {}
    parts = [
        address.get("road"),
        address.get("city") or address.get("town") or address.get("village"),
        address.get("country"),
    ]
    return ", ".join(str(p) for p in parts if p)


class ReverseGeocoder:
    def __init__(self, api_key: str, *, timeout: float = DEFAULT_REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self._api_key = api_key
        self._timeout = timeout
        self._http = session or requests.Session()

    def address_for(self, lat, long) -> str:
        """Readable address for a coordinate pair.

        Falls back to ``"lat, long"`` when the key is missing, the call fails or
        the response has nothing usable.
        """
        fallback = f"{lat}, {long}"
        if not self._api_key:
            logger.error("API key for geocoding is missing.")
            return fallback

        params = {"lat": lat, "lon": long, "api_key": self._api_key}
        try:
            response = self._http.get(REVERSE_URL, params=params, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.debug("Reverse geocoding %s failed: %s", fallback, e)
            return fallback

        if not isinstance(data, dict):
            return fallback
        return format_address(data.get("address")) or fallback
