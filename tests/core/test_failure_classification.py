from __future__ import annotations

import pytest

from classroom_attendance.core.enums import LookupFailureKind
from classroom_attendance.core.exceptions import LookupFailure, PermissionDenied, classify_failure

DENIED = LookupFailureKind.PERMISSION_DENIED
OTHER = LookupFailureKind.OTHER


class HttpError(Exception):
    def __init__(self, status_code):
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code


@pytest.mark.parametrize(
    "exc, kind",
    [
        (PermissionDenied(), DENIED),
        (LookupFailure("x", status=400), DENIED),
        (LookupFailure("x", status=401), DENIED),
        (LookupFailure("x", status=403), DENIED),
        (HttpError(403), DENIED),
        (LookupFailure("new row violates row-level security: PERMISSION denied"), DENIED),
        (RuntimeError("permission check failed"), DENIED),
        (LookupFailure("x", status=404), OTHER),
        (LookupFailure("timeout", status=504), OTHER),
        (RuntimeError("connection reset"), OTHER),
        (HttpError("bad"), OTHER),
    ],
)
def test_classify_failure(exc, kind):
    assert classify_failure(exc) == kind
