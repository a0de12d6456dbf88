from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _run(build, failure: str):
        data = request.get_json(silent=True) or {}
        try:
            return jsonify(build(data.get("employee_id"))), 200
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"error": str(e)}), 404
        except Exception:
            logger.exception(failure)
            return jsonify({"error": failure}), 500

    @app.route("/api/daily_rapport", methods=["POST"], endpoint="daily_rapport")
    def daily_rapport():
        return _run(container.report_service.daily_report, "Failed to generate daily rapport")

    @app.route("/api/monthly_rapport", methods=["POST"], endpoint="monthly_rapport")
    def monthly_rapport():
        return _run(container.report_service.monthly_report, "Failed to generate monthly rapport")
