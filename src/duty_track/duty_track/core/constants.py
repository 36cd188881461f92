"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

# Flask session keys (the browser app kept these in localStorage)
AUTH_TOKEN_KEY = "authToken"
USER_DATA_KEY = "userData"

# Address placeholders shown on the scan dashboard
NO_SCAN_ADDRESS = "N/A"
ADDRESS_UNAVAILABLE = "Address N/A"
ADDRESS_ERROR = "Error Fetching Address"
FETCHING_ADDRESS = "Fetching Address..."

# QR image rendering
QR_IMAGE_WIDTH = 256
QR_MARGIN = 2

DEFAULT_REQUEST_TIMEOUT = 15.0
DEFAULT_QR_FETCH_WORKERS = 8

# Circle Officer jurisdictions and the police stations under each one.
# Values are what the backend stores, labels are what the admin sees.
CO_OPTIONS = [
    ("city", "City"),
    ("kairana", "Kairana"),
    ("thanabhawan", "Thanabhawan"),
]

POLICE_STATIONS_BY_CO = {
    "city": [("shamli", "Shamli"), ("adarshMandi", "Adarsh Mandi")],
    "kairana": [("kairana", "Kairana"), ("jhinjhana", "Jhinjana"), ("kandhala", "Kandhala")],
    "thanabhawan": [("thanabhawan", "Thanabhawan"), ("babri", "Babri"), ("garipukhta", "Garipukhta")],
}
