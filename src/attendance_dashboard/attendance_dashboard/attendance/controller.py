from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import domain_error, fail, ok
from ..common.validators import require_iso_date, require_month, require_positive_int
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from ..users.session import admin_required, login_required
from .service import parse_status

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="set_attendance")
    @admin_required
    def set_attendance():
        data = request.get_json(silent=True) or {}
        try:
            record = container.attendance_service.set_status(
                employee_id=require_positive_int(data.get("employee_id"), "Employee"),
                work_date=require_iso_date(data.get("date"), "Date"),
                status=parse_status(data.get("status")),
            )
            return ok(
                {
                    "employee_id": record.employee_id,
                    "date": record.work_date.isoformat(),
                    "status": record.status.value,
                }
            )
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to update attendance")
            return fail("Unexpected error while updating attendance", status=500)

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="bulk_attendance")
    @admin_required
    def bulk_attendance():
        data = request.get_json(silent=True) or {}
        try:
            raw_ids = data.get("employee_ids")
            if raw_ids is not None and not isinstance(raw_ids, list):
                raise ValidationError("employee_ids must be a list")
            employee_ids = None if raw_ids is None else [require_positive_int(i, "Employee") for i in raw_ids]

            result = container.attendance_service.bulk_set_status(
                work_date=require_iso_date(data.get("date"), "Date"),
                status=parse_status(data.get("status")),
                employee_ids=employee_ids,
            )
            return ok(result.to_dict())
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Bulk attendance update failed")
            return fail("Unexpected error while updating attendance", status=500)

    @app.route("/api/attendance/monthly/<int:employee_id>", methods=["GET"], endpoint="monthly_attendance")
    @login_required
    def monthly_attendance(employee_id: int):
        try:
            month = require_month(request.args.get("month"))
            overview = container.attendance_service.monthly_overview(employee_id=employee_id, month=month)
            return ok(overview.to_dict())
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to load monthly attendance for %s", employee_id)
            return fail("Unexpected error while loading attendance", status=500)
