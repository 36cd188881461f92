import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "")
GEOCODE_API_KEY = os.getenv("GEOCODE_API_KEY", "")

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "15"))
QR_FETCH_WORKERS = int(os.getenv("QR_FETCH_WORKERS", "8"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
