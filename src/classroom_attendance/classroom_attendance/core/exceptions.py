from __future__ import annotations

from typing import Optional

from .constants import PERMISSION_STATUS_CODES
from .enums import LookupFailureKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ParseFailure(ValidationError):
    """Raised when a schedule entry, day name or time string cannot be parsed."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotEnrolledError(AuthorizationError):
    """Raised when a student acts on a section they are not enrolled in."""


class LookupFailure(DomainError):
    """An external lookup (seats, enrollments, sections) failed.

    ``status`` carries an HTTP-like status code when the source reports one.
    """

    def __init__(self, message: str, *, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class PermissionDenied(LookupFailure):
    """Lookup failed because the caller is not allowed to read the data."""

    def __init__(self, message: str = "permission denied", *, status: Optional[int] = 403):
        super().__init__(message, status=status)


def classify_failure(exc: BaseException) -> LookupFailureKind:
    """Decide whether a lookup failure is permission-related."""

    if isinstance(exc, PermissionDenied):
        return LookupFailureKind.PERMISSION_DENIED

    status = getattr(exc, "status", None)
    if status is None:
        status = getattr(exc, "status_code", None)
    if status is not None:
        try:
            if int(status) in PERMISSION_STATUS_CODES:
                return LookupFailureKind.PERMISSION_DENIED
        except (TypeError, ValueError):
            pass

    if "permission" in str(exc).lower():
        return LookupFailureKind.PERMISSION_DENIED
    return LookupFailureKind.OTHER
