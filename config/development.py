import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "classroom_attendance"),
}

# Check-in is accepted this many minutes before a class starts.
CHECKIN_BUFFER_MINUTES = int(os.getenv("CHECKIN_BUFFER_MINUTES", "10"))

# Degraded seat plan: student ids probed and grid shape synthesized.
SEAT_PROBE_LIMIT = int(os.getenv("SEAT_PROBE_LIMIT", "30"))
FALLBACK_GRID_ROWS = int(os.getenv("FALLBACK_GRID_ROWS", "5"))
FALLBACK_GRID_COLUMNS = int(os.getenv("FALLBACK_GRID_COLUMNS", "6"))

# QR payload prefix for section check-in codes
QR_PREFIX = os.getenv("QR_PREFIX", "attend:")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
