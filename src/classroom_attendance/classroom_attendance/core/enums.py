from __future__ import annotations

from enum import Enum


class LookupFailureKind(str, Enum):
    """How a failed seat/enrollment lookup is classified."""

    PERMISSION_DENIED = "PERMISSION_DENIED"
    OTHER = "OTHER"


class SeatPlanStatus(str, Enum):
    """States of the seat-plan loading flow."""

    IDLE = "IDLE"
    LOADING = "LOADING"
    ATTEMPT_SECONDARY = "ATTEMPT_SECONDARY"
    ATTEMPT_FALLBACK = "ATTEMPT_FALLBACK"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class SeatPlanOrigin(str, Enum):
    """Which source produced a seat plan snapshot."""

    PRIMARY = "PRIMARY"
    SECONDARY = "SECONDARY"
    FALLBACK = "FALLBACK"
