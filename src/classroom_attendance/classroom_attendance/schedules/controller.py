from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..core.exceptions import LookupFailure, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

WINDOW_UNAVAILABLE_MESSAGE = "Unable to check the class schedule right now."


def register(app: Flask, container: Container) -> None:
    @app.route("/api/sections/<int:section_id>/window", methods=["GET"], endpoint="api_section_window")
    def api_section_window(section_id: int):
        try:
            result = container.eligibility_service.check(section_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except LookupFailure as e:
            logger.warning("Eligibility check for section %s failed: %s", section_id, e)
            return jsonify({"success": False, "message": WINDOW_UNAVAILABLE_MESSAGE}), 503

        return jsonify(
            {
                "success": True,
                "section_id": result.section_id,
                "eligible": result.eligible,
                "checked_at": result.checked_at.isoformat(timespec="minutes"),
                "buffer_minutes": result.buffer_minutes,
                "schedule": result.schedule,
            }
        ), 200
