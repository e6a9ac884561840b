from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.web import api_login_required, current_user_id
from ..core.exceptions import AuthorizationError, DomainError, LookupFailure, ValidationError
from ..container import Container
from .grid import SeatGridModel, to_display_id
from .loader import SEATS_UNAVAILABLE_MESSAGE, SeatPlanResult
from .model import Seat, SeatCoordinate

logger = logging.getLogger(__name__)


def _seat_json(seat: Seat, *, student_id: int) -> dict:
    return {
        "id": seat.seat_id,
        "display_id": to_display_id(seat.coordinate),
        "row": seat.row,
        "column": seat.column,
        "occupied": seat.is_taken,
        "mine": seat.occupant_id == student_id,
        "placeholder": seat.is_placeholder,
    }


def register(app: Flask, container: Container) -> None:
    def _plan_json(result: SeatPlanResult, student_id: int) -> dict:
        body = {
            "success": result.ok,
            "status": result.status.value,
            "transitions": [s.value for s in result.transitions],
            "message": result.message,
        }
        if result.snapshot is None:
            return body

        if result.snapshot.is_synthetic:
            rows, columns = container.fallback_reconstructor.rows, container.fallback_reconstructor.columns
        else:
            rows, columns = container.seat_service.rows, container.seat_service.columns
        grid = SeatGridModel.from_snapshot(result.snapshot, rows=rows, columns=columns)

        body.update(
            {
                "origin": result.snapshot.origin.value,
                "rows": rows,
                "columns": columns,
                "seats": [_seat_json(s, student_id=student_id) for s in grid.seats],
                "own_seat": to_display_id(result.own_seat.coordinate) if result.own_seat else None,
            }
        )
        return body

    @app.route("/api/sections/<int:section_id>/seats", methods=["GET"], endpoint="api_section_seats")
    @api_login_required
    def api_section_seats(section_id: int):
        student_id = current_user_id()
        try:
            result = container.seat_service.load_plan(section_id=section_id, student_id=student_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except LookupFailure as e:
            logger.warning("Seat plan for section %s failed: %s", section_id, e)
            return jsonify({"success": False, "message": SEATS_UNAVAILABLE_MESSAGE}), 503

        return jsonify(_plan_json(result, student_id)), (200 if result.ok else 400)

    @app.route("/api/sections/<int:section_id>/seats", methods=["POST"], endpoint="api_pick_seat")
    @api_login_required
    def api_pick_seat(section_id: int):
        data = request.get_json(silent=True) or {}
        student_id = current_user_id()
        try:
            if data.get("seat"):
                coordinate = str(data["seat"])
            else:
                coordinate = SeatCoordinate(row=int(data.get("row")), column=int(data.get("column")))
        except (TypeError, ValueError):
            return jsonify({"success": False, "message": "Seat is required"}), 400

        try:
            seat = container.seat_service.pick_seat(section_id=section_id, student_id=student_id, coordinate=coordinate)
        except AuthorizationError as e:
            return jsonify({"success": False, "message": str(e)}), 403
        except DomainError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Pick seat failed for section %s", section_id)
            return jsonify({"success": False, "message": "System error while picking a seat"}), 500

        return jsonify({"success": True, "seat": _seat_json(seat, student_id=student_id)}), 200

    @app.route("/api/sections/<int:section_id>/seats/me", methods=["DELETE"], endpoint="api_vacate_seat")
    @api_login_required
    def api_vacate_seat(section_id: int):
        try:
            container.seat_service.vacate(section_id=section_id, student_id=current_user_id())
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        return jsonify({"success": True}), 200
