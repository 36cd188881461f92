SECRET_KEY = "test-secret"

API_BASE_URL = "http://backend.test"
GEOCODE_API_KEY = ""

REQUEST_TIMEOUT = 1.0
QR_FETCH_WORKERS = 2

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
