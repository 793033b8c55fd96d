"""Monthly attendance aggregation.

Pure functions over one employee's records for one month window. Nothing here
touches the record store or the clock: `today` is always passed in.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import iter_days
from ..common.numbers import round_half_up
from ..core.constants import HOURS_PER_HALF_DAY, HOURS_PER_PRESENT_DAY
from ..core.enums import AttendanceStatus, DayStatus
from ..payroll.calculator.base import PayrollCalculator
from ..payroll.calculator.standard_calculator import StandardPayrollCalculator
from .model import AttendanceRecord, DayAttendance, MonthlySummary

_LABELS = {
    DayStatus.PRESENT: "Present",
    DayStatus.HALF_DAY: "Half-day",
    DayStatus.ABSENT: "Absent",
    DayStatus.NOT_JOINED: "Not joined",
    DayStatus.UPCOMING: "Upcoming",
}
UNMARKED_LABEL = "Absent (not marked)"

_HOURS = {
    DayStatus.PRESENT: HOURS_PER_PRESENT_DAY,
    DayStatus.HALF_DAY: HOURS_PER_HALF_DAY,
}

_STREAK_STATUSES = (AttendanceStatus.PRESENT, AttendanceStatus.HALF_DAY)


def _status_by_date(records: Iterable[AttendanceRecord]) -> dict[date, AttendanceStatus]:
    # Later entries win, same as the store's upsert.
    return {r.work_date: r.status for r in records}


def resolve_day(
    day: date,
    *,
    joining_date: Optional[date],
    today: date,
    recorded: Optional[AttendanceStatus],
) -> DayAttendance:
    if joining_date is not None and day < joining_date:
        status, marked = DayStatus.NOT_JOINED, False
    elif day > today:
        status, marked = DayStatus.UPCOMING, False
    elif recorded is not None:
        status, marked = DayStatus.from_attendance(recorded), True
    else:
        status, marked = DayStatus.ABSENT, False

    label = _LABELS[status] if marked or status != DayStatus.ABSENT else UNMARKED_LABEL
    return DayAttendance(
        work_date=day,
        status=status,
        marked=marked,
        label=label,
        hours=_HOURS.get(status, 0),
    )


def build_month_days(
    month_start: date,
    month_end: date,
    *,
    joining_date: Optional[date],
    today: date,
    records: Iterable[AttendanceRecord],
) -> list[DayAttendance]:
    by_date = _status_by_date(records)
    return [
        resolve_day(day, joining_date=joining_date, today=today, recorded=by_date.get(day))
        for day in iter_days(month_start, month_end)
    ]


def compute_streak(
    records: Iterable[AttendanceRecord],
    *,
    today: date,
    joining_date: Optional[date] = None,
) -> int:
    """Consecutive present/half-day days walking back from today.

    Stops at the first absent or unmarked day, and at the joining date.
    """

    by_date = _status_by_date(records)
    streak = 0
    day = today
    while by_date.get(day) in _STREAK_STATUSES:
        if joining_date is not None and day < joining_date:
            break
        streak += 1
        day -= timedelta(days=1)
    return streak


def summarize_month(
    *,
    month_start: date,
    month_end: date,
    joining_date: Optional[date],
    salary: float,
    records: Iterable[AttendanceRecord],
    today: date,
    history: Optional[Iterable[AttendanceRecord]] = None,
    calculator: Optional[PayrollCalculator] = None,
) -> MonthlySummary:
    """Per-day statuses plus totals for one employee and one month.

    `history` feeds the streak and may reach past the month; it defaults to
    the month's own records.
    """

    calculator = calculator or StandardPayrollCalculator()
    records = list(records)
    days = build_month_days(month_start, month_end, joining_date=joining_date, today=today, records=records)
    days_in_month = len(days)

    # Joining date through today, clamped to the month.
    counted = [d for d in days if d.is_counted]
    working_days = len(counted)

    present_days = sum(1 for d in counted if d.status == DayStatus.PRESENT)
    half_days = sum(1 for d in counted if d.status == DayStatus.HALF_DAY)

    if working_days:
        percentage = round_half_up(((present_days + 0.5 * half_days) / working_days) * 100)
    else:
        percentage = 0

    hours_worked = present_days * HOURS_PER_PRESENT_DAY + half_days * HOURS_PER_HALF_DAY
    expected_hours = working_days * HOURS_PER_PRESENT_DAY

    return MonthlySummary(
        month_start=month_start,
        month_end=month_end,
        days=days,
        working_days=working_days,
        present_days=present_days,
        half_days=half_days,
        absent_days=working_days - present_days - half_days,
        attendance_percentage=percentage,
        hours_worked=hours_worked,
        expected_hours=expected_hours,
        daily_salary=calculator.daily_salary(salary=salary, days_in_month=days_in_month),
        current_balance=calculator.current_balance(
            hours_worked=hours_worked, expected_hours=expected_hours, salary=salary
        ),
        streak=compute_streak(records if history is None else history, today=today, joining_date=joining_date),
    )
