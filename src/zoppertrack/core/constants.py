"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_KEY_FORMAT = "%Y-%m-%d"
VISIT_DATE_FORMAT = "%d/%m/%Y"

DEFAULT_API_TIMEOUT_SECONDS = 15
DEFAULT_TODAY_FETCH_WINDOW = "Last 7 Days"

# Upstream fetch windows and how many days back each one reaches.
FETCH_WINDOW_DAYS = {
    "Today": 0,
    "Last 7 Days": 7,
    "Last 30 Days": 30,
    "Last 90 Days": 90,
    "Last Year": 365,
}

EXPORT_SHEET_NAME = "Attendance Report"
EXPORT_HEADER_NAME = "Executive Name"
EXPORT_HEADER_TOTAL = "Total (Present/Working Days)"
EXPORT_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

ACCESS_TOKEN_COOKIE = "accessToken"
