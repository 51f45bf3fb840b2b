from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.web import manager_required

logger = logging.getLogger(__name__)


def register(app: Flask, container) -> None:
    @app.route("/api/users/employees", methods=["GET"], endpoint="list_employees")
    @manager_required
    def list_employees():
        try:
            employees = container.employee_service.list_employees()
        except Exception:
            logger.exception("Employee listing failed")
            return jsonify({"message": "Failed to load employees"}), 500

        return jsonify(
            [
                {
                    "id": e.employee_id,
                    "name": e.name,
                    "employee_code": e.employee_code,
                    "department": e.department,
                }
                for e in employees
            ]
        )
