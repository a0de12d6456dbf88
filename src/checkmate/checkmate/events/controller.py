from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.enums import EventKind
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.presence_log_service

    def _list_logs(kind: EventKind):
        try:
            return jsonify(service.list_logs(kind)), 200
        except Exception:
            logger.exception("listing %s logs failed", kind.value)
            return jsonify({"error": f"Failed to fetch {kind.value} logs"}), 500

    def _create_log(kind: EventKind):
        data = request.get_json(silent=True) or {}
        try:
            outcome = service.record_manual(kind, data.get("rfid_tag"), data.get("pin"))
            return jsonify(outcome.event.to_dict()), 201 if outcome.created else 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception("creating %s log failed", kind.value)
            return jsonify({"error": f"Failed to create {kind.value} log"}), 500

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_logs")
    def attendance_logs():
        return _list_logs(EventKind.ATTENDANCE)

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_create")
    def attendance_create():
        return _create_log(EventKind.ATTENDANCE)

    @app.route("/api/leaves", methods=["GET"], endpoint="leave_logs")
    def leave_logs():
        return _list_logs(EventKind.LEAVE)

    @app.route("/api/leaves", methods=["POST"], endpoint="leave_create")
    def leave_create():
        return _create_log(EventKind.LEAVE)

    @app.route("/api/employees_today", methods=["GET"], endpoint="employees_today")
    def employees_today():
        try:
            return jsonify(service.presence_board()), 200
        except Exception:
            logger.exception("presence board failed")
            return jsonify({"error": "Failed to fetch employee status"}), 500

    @app.route("/api/check-in-today", methods=["GET"], endpoint="check_in_today")
    def check_in_today():
        try:
            return jsonify(service.todays_checkins()), 200
        except Exception:
            logger.exception("listing today's check-ins failed")
            return jsonify({"error": "Failed to fetch check-ins"}), 500
