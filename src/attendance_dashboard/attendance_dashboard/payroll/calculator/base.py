from __future__ import annotations

from abc import ABC, abstractmethod


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def current_balance(self, *, hours_worked: int, expected_hours: int, salary: float) -> int:
        raise NotImplementedError

    @abstractmethod
    def daily_salary(self, *, salary: float, days_in_month: int) -> float:
        raise NotImplementedError
