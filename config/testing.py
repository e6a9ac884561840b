import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "classroom_attendance_test"),
}

CHECKIN_BUFFER_MINUTES = 10
SEAT_PROBE_LIMIT = 30
FALLBACK_GRID_ROWS = 5
FALLBACK_GRID_COLUMNS = 6
QR_PREFIX = "attend:"

LOG_LEVEL = "DEBUG"

DEBUG = False
TESTING = True
