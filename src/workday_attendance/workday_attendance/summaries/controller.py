from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import error_response, manager_required, to_jsonable
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    service = container.summary_service

    @app.route("/api/dashboard/manager/summary", methods=["GET"], endpoint="manager_summary")
    @manager_required
    def manager_summary():
        try:
            return jsonify(to_jsonable(service.daily_snapshot()))
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Manager summary failed")
            return jsonify({"message": "Failed to load dashboard summary"}), 500

    @app.route("/api/dashboard/manager/weekly", methods=["GET"], endpoint="manager_weekly")
    @manager_required
    def manager_weekly():
        try:
            return jsonify(to_jsonable(service.weekly_trend()))
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Manager weekly failed")
            return jsonify({"message": "Failed to load weekly attendance trend"}), 500
