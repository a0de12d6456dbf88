from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/hardware_endpoint", methods=["GET"], endpoint="hardware_roster")
    def hardware_roster():
        """Employees with only what scan devices need (id, name, tag, PIN)."""
        try:
            return jsonify(container.presence_log_service.device_roster()), 200
        except Exception:
            logger.exception("device roster failed")
            return jsonify({"error": "Failed to fetch employees"}), 500

    @app.route("/api/hardware_endpoint", methods=["POST"], endpoint="hardware_admit")
    def hardware_admit():
        """Validate a scan and record attendance/leave when admitted."""
        data = request.get_json(silent=True) or {}
        try:
            result = container.access_validator.admit(data.get("rfid_tag"), data.get("pin"))
            return jsonify(result.to_response()), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except Exception:
            logger.exception("admission failed")
            return jsonify({"error": "Failed to process request"}), 500
