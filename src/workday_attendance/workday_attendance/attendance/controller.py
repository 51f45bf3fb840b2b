from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.web import current_employee_id, error_response, login_required, manager_required, to_jsonable
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, ValidationError
from ..reports.csv_export import render_attendance_csv
from .classifier import effective_status
from .model import AttendanceRecord, AttendanceReportRow

logger = logging.getLogger(__name__)


def record_to_dict(record: Optional[AttendanceRecord]) -> dict:
    if record is None:
        return {}
    return {
        "id": record.attendance_id,
        "employee_id": record.employee_id,
        "date": record.work_date.isoformat(),
        "check_in_time": to_jsonable(record.check_in_time),
        "check_out_time": to_jsonable(record.check_out_time),
        "total_hours": to_jsonable(record.total_hours),
        "status": record.status.value if record.status else None,
        "display_status": effective_status(record).value,
        "is_late": record.is_late,
    }


def row_to_dict(row: AttendanceReportRow) -> dict:
    out = record_to_dict(row.record)
    emp = row.employee
    out["employee"] = (
        {
            "id": emp.employee_id,
            "name": emp.name,
            "employee_code": emp.employee_code,
            "department": emp.department,
            "role": emp.role.value,
        }
        if emp
        else None
    )
    return out


def _optional_date(name: str):
    value = request.args.get(name)
    return parse_iso_date(value) if value else None


def _optional_status() -> Optional[AttendanceStatus]:
    value = request.args.get("status")
    if not value:
        return None
    try:
        return AttendanceStatus(value)
    except ValueError as exc:
        raise ValidationError(f"unknown status filter {value!r}") from exc


def _int_arg(name: str, default: int) -> int:
    value = request.args.get(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def register(app: Flask, container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        try:
            record = service.check_in(current_employee_id())
            return jsonify({"message": "Check-in successful", "attendance": record_to_dict(record)})
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Check-in failed")
            return jsonify({"message": "Check-in failed"}), 500

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        try:
            record = service.check_out(current_employee_id())
            return jsonify(
                {
                    "message": "Check-out successful",
                    "total_hours": to_jsonable(record.total_hours),
                    "status": record.status.value,
                    "is_late": record.is_late,
                    "attendance": record_to_dict(record),
                }
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Check-out failed")
            return jsonify({"message": "Check-out failed"}), 500

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        try:
            return jsonify(record_to_dict(service.get_today_record(current_employee_id())))
        except Exception:
            logger.exception("Today status failed")
            return jsonify({"message": "Failed to fetch attendance"}), 500

    @app.route("/api/attendance/my", methods=["GET"], endpoint="attendance_my")
    @login_required
    def attendance_my():
        try:
            records = service.get_history(current_employee_id(), limit=_int_arg("limit", 30))
            return jsonify([record_to_dict(r) for r in records])
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("History failed")
            return jsonify({"message": "Failed to fetch history"}), 500

    @app.route("/api/attendance/my-summary", methods=["GET"], endpoint="attendance_my_summary")
    @login_required
    def attendance_my_summary():
        try:
            summary = container.summary_service.monthly_summary(current_employee_id(), request.args.get("month"))
            body = to_jsonable(summary)
            body["days_considered"] = summary.days_considered
            return jsonify(body)
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Monthly summary failed")
            return jsonify({"message": "Failed to fetch summary"}), 500

    @app.route("/api/attendance/month", methods=["GET"], endpoint="attendance_month")
    @login_required
    def attendance_month():
        try:
            days = service.get_month_calendar(current_employee_id(), request.args.get("month"))
            return jsonify(to_jsonable(days))
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Calendar month failed")
            return jsonify({"message": "Failed to load month data"}), 500

    @app.route("/api/attendance/all", methods=["GET"], endpoint="attendance_all")
    @manager_required
    def attendance_all():
        try:
            rows = service.list_records(
                start=_optional_date("startDate"),
                end=_optional_date("endDate"),
                employee_code=request.args.get("employeeId") or None,
                department=request.args.get("department") or None,
                status=_optional_status(),
                limit=_int_arg("limit", 50),
            )
            return jsonify([row_to_dict(r) for r in rows])
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Attendance listing failed")
            return jsonify({"message": "Failed to fetch all attendance"}), 500

    @app.route("/api/attendance/export", methods=["GET"], endpoint="attendance_export")
    @manager_required
    def attendance_export():
        try:
            data = service.export_rows(
                start=_optional_date("startDate"),
                end=_optional_date("endDate"),
                employee_code=request.args.get("employeeId") or None,
            )
        except DomainError as e:
            return error_response(e)
        except Exception:
            logger.exception("Export failed")
            return jsonify({"message": "Failed to export attendance"}), 500

        csv_bytes = render_attendance_csv(data.rows).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{data.filename}"'},
        )
