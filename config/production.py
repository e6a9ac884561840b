import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "classroom"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "classroom_attendance"),
}

CHECKIN_BUFFER_MINUTES = int(os.getenv("CHECKIN_BUFFER_MINUTES", "10"))

SEAT_PROBE_LIMIT = int(os.getenv("SEAT_PROBE_LIMIT", "30"))
FALLBACK_GRID_ROWS = int(os.getenv("FALLBACK_GRID_ROWS", "5"))
FALLBACK_GRID_COLUMNS = int(os.getenv("FALLBACK_GRID_COLUMNS", "6"))

QR_PREFIX = os.getenv("QR_PREFIX", "attend:")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
