"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BUFFER_MINUTES = 10

# Display grid used for seat labels (W1..A7).
DISPLAY_GRID_ROWS = 7
DISPLAY_GRID_COLUMNS = 4

# Grid synthesized when the seat listing is not readable.
FALLBACK_GRID_ROWS = 5
FALLBACK_GRID_COLUMNS = 6
DEFAULT_SEAT_PROBE_LIMIT = 30

QR_ATTENDANCE_PREFIX = "attend:"

PERMISSION_STATUS_CODES = frozenset({400, 401, 403})
