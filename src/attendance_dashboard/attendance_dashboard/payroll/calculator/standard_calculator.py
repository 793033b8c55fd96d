from __future__ import annotations

from ...common.numbers import round_half_up
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: salary pro-rated by hours worked over expected hours."""

    def current_balance(self, *, hours_worked: int, expected_hours: int, salary: float) -> int:
        if expected_hours <= 0:
            return 0
        return round_half_up((hours_worked / expected_hours) * float(salary))

    def daily_salary(self, *, salary: float, days_in_month: int) -> float:
        if days_in_month <= 0:
            return 0.0
        return float(salary) / days_in_month
