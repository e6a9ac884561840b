from __future__ import annotations

import io
import logging

from flask import Flask, jsonify, request, send_file

from ..common.web import api_login_required, current_user_id
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container
from .qr import render_qr_png

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/checkin/qr", methods=["POST"], endpoint="api_checkin_qr")
    @api_login_required
    def api_checkin_qr():
        """QR check-in: accepted only inside the section's eligibility window."""
        data = request.get_json(silent=True) or {}
        qr_code = str(data.get("qr_code") or "").strip()
        if not qr_code:
            return jsonify({"success": False, "message": "QR code must not be empty"}), 400

        try:
            result = container.checkin_service.check_in(current_user_id(), qr_code)
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("QR check-in failed")
            return jsonify({"success": False, "message": "System error while recording attendance"}), 500

        return jsonify(
            {
                "success": True,
                "attendance_id": result.attendance_id,
                "section_id": result.section_id,
                "message": f"Attendance recorded for {result.section_name}",
                "checked_in_at": result.checked_in_at.isoformat(timespec="seconds"),
            }
        ), 200

    @app.route("/api/sections/<int:section_id>/qr.png", methods=["GET"], endpoint="api_section_qr")
    def api_section_qr(section_id: int):
        png = render_qr_png(section_id, prefix=container.qr_prefix)
        return send_file(io.BytesIO(png), mimetype="image/png")
