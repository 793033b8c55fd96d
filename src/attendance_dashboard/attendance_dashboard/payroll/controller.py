from __future__ import annotations

import csv
import io
import logging

from flask import Flask, Response, request

from ..common.responses import domain_error, fail, ok
from ..common.validators import require_month
from ..container import Container
from ..core.exceptions import DomainError
from ..users.session import admin_required, login_required
from .service import REPORT_FIELDS, ReportData

logger = logging.getLogger(__name__)


def _write_report_csv(report: ReportData) -> Response:
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS, extrasaction="ignore")
    writer.writeheader()
    for row in report.rows:
        writer.writerow(row)

    # BOM so Excel opens UTF-8 names correctly.
    body = "\ufeff" + out.getvalue()
    return Response(
        body,
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename=payroll_{report.month}.csv"},
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="payroll_report")
    @login_required
    def payroll_report():
        try:
            month = require_month(request.args.get("month"))
            report = container.payroll_report_service.build_month_report(month=month)
            return ok({"month": report.month, "employees": report.rows})
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to build payroll report")
            return fail("Unexpected error while building the report", status=500)

    @app.route("/api/payroll/export", methods=["GET"], endpoint="payroll_export")
    @admin_required
    def payroll_export():
        try:
            month = require_month(request.args.get("month"))
            report = container.payroll_report_service.build_month_report(month=month)
            return _write_report_csv(report)
        except DomainError as e:
            return domain_error(e)
        except Exception:
            logger.exception("Failed to export payroll report")
            return fail("Unexpected error while exporting the report", status=500)
