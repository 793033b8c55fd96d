from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import format_iso_date, format_month, month_bounds, today_utc
from ..core.constants import DEFAULT_STREAK_LOOKBACK_DAYS, MISSING_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import PayrollCalculator
from ..roles.repository import RoleRepository
from .aggregator import summarize_month
from .model import AttendanceRecord, MonthlySummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: Optional[str]) -> AttendanceStatus:
    allowed = ", ".join(s.value for s in AttendanceStatus)
    if not isinstance(value, str):
        raise ValidationError(f"Status must be one of: {allowed}")
    try:
        return AttendanceStatus(value.strip().lower())
    except ValueError:
        raise ValidationError(f"Status must be one of: {allowed}")


@dataclass(frozen=True)
class BulkResult:
    work_date: date
    status: AttendanceStatus
    written: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "date": format_iso_date(self.work_date),
            "status": self.status.value,
            "written": self.written,
            "skipped": self.skipped,
        }


@dataclass(frozen=True)
class MonthlyOverview:
    """Monthly summary plus the query that produced it.

    Clients compare `employee_id`/`month` against their current selection and
    drop responses that no longer match.
    """

    employee_id: int
    month: str
    employee_name: str
    role_name: str
    summary: MonthlySummary

    def to_dict(self) -> dict:
        s = self.summary
        return {
            "employee_id": self.employee_id,
            "month": self.month,
            "employee_name": self.employee_name,
            "role_name": self.role_name,
            "days": [
                {
                    "date": format_iso_date(d.work_date),
                    "status": d.status.value,
                    "marked": d.marked,
                    "label": d.label,
                    "hours": d.hours,
                }
                for d in s.days
            ],
            "working_days": s.working_days,
            "present_days": s.present_days,
            "half_days": s.half_days,
            "absent_days": s.absent_days,
            "attendance_percentage": s.attendance_percentage,
            "hours_worked": s.hours_worked,
            "expected_hours": s.expected_hours,
            "daily_salary": round(s.daily_salary, 2),
            "current_balance": s.current_balance,
            "streak": s.streak,
        }


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        roles: RoleRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        streak_lookback_days: int = DEFAULT_STREAK_LOOKBACK_DAYS,
    ):
        self._attendance = attendance
        self._employees = employees
        self._roles = roles
        self._calculator = calculator
        self._streak_lookback_days = int(streak_lookback_days)

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def _refresh_cached_status(self, employee_ids: list[int], status: AttendanceStatus, *, work_date: date, today: date) -> None:
        if employee_ids and work_date == today:
            self._employees.set_status(employee_ids, status)

    def set_status(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        today: Optional[date] = None,
    ) -> AttendanceRecord:
        today = today or today_utc()
        employee = self._get_employee(employee_id)
        if not employee.has_joined_by(work_date):
            raise ValidationError(
                f"{employee.name} joined on {format_iso_date(employee.joining_date)}; "
                f"cannot mark attendance for {format_iso_date(work_date)}"
            )

        record = AttendanceRecord(employee_id=employee.employee_id, work_date=work_date, status=status)
        self._attendance.upsert_many([record])
        self._refresh_cached_status([employee.employee_id], status, work_date=work_date, today=today)
        return record

    def bulk_set_status(
        self,
        *,
        work_date: date,
        status: AttendanceStatus,
        employee_ids: Optional[Iterable[int]] = None,
        today: Optional[date] = None,
    ) -> BulkResult:
        """Mark every eligible employee with one status for one date.

        With no employee_ids the whole roster is used. Employees who had not
        joined by work_date are skipped. Rows are committed in one upsert.
        """

        today = today or today_utc()
        roster = {e.employee_id: e for e in self._employees.list_all()}

        if employee_ids is None:
            targets = list(roster)
        else:
            # dict keeps first-seen order and collapses duplicates
            targets = list(dict.fromkeys(int(i) for i in employee_ids))
            missing = [i for i in targets if i not in roster]
            if missing:
                raise NotFoundError(f"Unknown employee id(s): {', '.join(map(str, missing))}")

        written: list[int] = []
        skipped: list[int] = []
        for employee_id in targets:
            if roster[employee_id].has_joined_by(work_date):
                written.append(employee_id)
            else:
                skipped.append(employee_id)

        records = [AttendanceRecord(employee_id=i, work_date=work_date, status=status) for i in written]
        self._attendance.upsert_many(records)
        self._refresh_cached_status(written, status, work_date=work_date, today=today)

        logger.info(
            "Bulk set %s on %s: %d written, %d skipped (not yet joined)",
            status.value,
            format_iso_date(work_date),
            len(written),
            len(skipped),
        )
        return BulkResult(work_date=work_date, status=status, written=written, skipped=skipped)

    def monthly_overview(
        self,
        *,
        employee_id: int,
        month: date,
        today: Optional[date] = None,
    ) -> MonthlyOverview:
        today = today or today_utc()
        month_start, month_end = month_bounds(month)
        if month_start > today:
            raise ValidationError("Cannot view attendance for a future month")

        employee = self._get_employee(employee_id)
        role = self._roles.get_by_id(employee.role_id) if employee.role_id is not None else None

        records = self._attendance.list_for_range(
            start_date=month_start, end_date=month_end, employee_id=employee.employee_id
        )
        history = self._attendance.list_recent_for_employee(
            employee.employee_id, until=today, limit=self._streak_lookback_days
        )

        summary = summarize_month(
            month_start=month_start,
            month_end=month_end,
            joining_date=employee.joining_date,
            salary=role.salary if role else 0,
            records=records,
            history=history,
            today=today,
            calculator=self._calculator,
        )
        return MonthlyOverview(
            employee_id=employee.employee_id,
            month=format_month(month_start),
            employee_name=employee.name,
            role_name=role.name if role else MISSING_LABEL,
            summary=summary,
        )
