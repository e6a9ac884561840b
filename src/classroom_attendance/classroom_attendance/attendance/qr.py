"""QR payloads for section check-in.

A section's check-in code encodes ``attend:<section_id>``.
"""

from __future__ import annotations

import io

import qrcode

from ..core.constants import QR_ATTENDANCE_PREFIX
from ..core.exceptions import ValidationError


def build_qr_payload(section_id: int, *, prefix: str = QR_ATTENDANCE_PREFIX) -> str:
    return f"{prefix}{int(section_id)}"


def parse_qr_payload(payload: str, *, prefix: str = QR_ATTENDANCE_PREFIX) -> int:
    text = (payload or "").strip()
    if not text.startswith(prefix):
        raise ValidationError("Invalid QR code format")

    raw_id = text[len(prefix):].strip()
    if not (raw_id.isascii() and raw_id.isdigit()) or int(raw_id) <= 0:
        raise ValidationError("Invalid QR code")
    return int(raw_id)


def render_qr_png(section_id: int, *, prefix: str = QR_ATTENDANCE_PREFIX, box_size: int = 8) -> bytes:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=box_size,
        border=2,
    )
    qr.add_data(build_qr_payload(section_id, prefix=prefix))
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
