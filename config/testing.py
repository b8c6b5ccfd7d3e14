SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": "http://zoppertrack.test",
    "access_token": "",
    "timeout": 1,
}

TODAY_FETCH_WINDOW = "Last 7 Days"

DEFAULT_DATE_FILTER = {"dateFilter": "Today"}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
