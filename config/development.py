import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Base URL of the Duty Track REST backend
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")

# geocode.maps.co key used for reverse geocoding scan locations
GEOCODE_API_KEY = os.getenv("GEOCODE_API_KEY", "")

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))
QR_FETCH_WORKERS = int(os.getenv("QR_FETCH_WORKERS", "8"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
