from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..attendance.aggregator import summarize_month
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_month, month_bounds, today_utc
from ..core.constants import DEFAULT_STREAK_LOOKBACK_DAYS, MISSING_LABEL
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..roles.repository import RoleRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator

REPORT_FIELDS = [
    "employee_id",
    "name",
    "role_name",
    "status",
    "attendance_percentage",
    "streak",
    "working_days",
    "present_days",
    "half_days",
    "hours_worked",
    "expected_hours",
    "salary",
    "current_balance",
]


@dataclass(frozen=True)
class ReportData:
    month: str
    rows: list[dict]


class PayrollReportService:
    """Dashboard grid: one attendance/balance card per employee for a month."""

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
        self._calculator = calculator or StandardPayrollCalculator()
        self._streak_lookback_days = int(streak_lookback_days)

    def build_month_report(self, *, month: date, today: Optional[date] = None) -> ReportData:
        today = today or today_utc()
        month_start, month_end = month_bounds(month)
        if month_start > today:
            raise ValidationError("Cannot build a report for a future month")

        roles = {r.role_id: r for r in self._roles.list_all()}

        month_records: dict[int, list[AttendanceRecord]] = defaultdict(list)
        for r in self._attendance.list_for_range(start_date=month_start, end_date=month_end):
            month_records[r.employee_id].append(r)

        history: dict[int, list[AttendanceRecord]] = defaultdict(list)
        history_start = today - timedelta(days=self._streak_lookback_days)
        for r in self._attendance.list_for_range(start_date=history_start, end_date=today):
            history[r.employee_id].append(r)

        rows: list[dict] = []
        for e in self._employees.list_all():
            role = roles.get(e.role_id) if e.role_id is not None else None
            salary = role.salary if role else 0
            s = summarize_month(
                month_start=month_start,
                month_end=month_end,
                joining_date=e.joining_date,
                salary=salary,
                records=month_records.get(e.employee_id, []),
                history=history.get(e.employee_id, []),
                today=today,
                calculator=self._calculator,
            )
            rows.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "role_name": role.name if role else MISSING_LABEL,
                    "avatar_url": e.avatar_url,
                    "status": e.status.value,
                    "attendance_percentage": s.attendance_percentage,
                    "streak": s.streak,
                    "working_days": s.working_days,
                    "present_days": s.present_days,
                    "half_days": s.half_days,
                    "hours_worked": s.hours_worked,
                    "expected_hours": s.expected_hours,
                    "salary": salary,
                    "current_balance": s.current_balance,
                }
            )

        rows.sort(key=lambda x: (x["name"].lower(), x["employee_id"]))
        return ReportData(month=format_month(month_start), rows=rows)
