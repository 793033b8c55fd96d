from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus, DayStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark, keyed by (employee_id, work_date)."""

    employee_id: int
    work_date: date
    status: AttendanceStatus

    @property
    def key(self) -> tuple[int, date]:
        return self.employee_id, self.work_date


@dataclass(frozen=True)
class DayAttendance:
    """Effective status of one calendar day in a monthly view.

    `marked` is False when no record exists; such past days count as absent.
    """

    work_date: date
    status: DayStatus
    marked: bool
    label: str
    hours: int

    @property
    def is_counted(self) -> bool:
        return self.status not in (DayStatus.NOT_JOINED, DayStatus.UPCOMING)


@dataclass(frozen=True)
class MonthlySummary:
    month_start: date
    month_end: date
    days: list[DayAttendance]
    working_days: int
    present_days: int
    half_days: int
    absent_days: int
    attendance_percentage: int
    hours_worked: int
    expected_hours: int
    daily_salary: float
    current_balance: int
    streak: int
