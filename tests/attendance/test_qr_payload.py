from __future__ import annotations

import pytest

from classroom_attendance.attendance.qr import build_qr_payload, parse_qr_payload, render_qr_png
from classroom_attendance.core.exceptions import ValidationError


def test_build_and_parse():
    assert build_qr_payload(12) == "attend:12"
    assert parse_qr_payload("attend:12") == 12
    assert parse_qr_payload("  attend:12\n") == 12


def test_custom_prefix():
    assert parse_qr_payload("class:4", prefix="class:") == 4


@pytest.mark.parametrize("payload", ["", "12", "attendance:12", "ATTEND:12"])
def test_wrong_prefix(payload):
    with pytest.raises(ValidationError, match="format"):
        parse_qr_payload(payload)


@pytest.mark.parametrize("payload", ["attend:", "attend:abc", "attend:0", "attend:-3", "attend:1.5"])
def test_bad_section_id(payload):
    with pytest.raises(ValidationError, match="Invalid QR code"):
        parse_qr_payload(payload)


def test_render_png():
    png = render_qr_png(3)
    assert png.startswith(b"\x89PNG")
