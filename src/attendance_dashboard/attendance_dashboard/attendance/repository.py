from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_recent_for_employee(self, employee_id: int, *, until: date, limit: int) -> Sequence[AttendanceRecord]:
        """Most recent records on or before `until`, newest first."""

        raise NotImplementedError

    def upsert_many(self, records: Sequence[AttendanceRecord]) -> None:
        """Insert-or-update every record in one transaction, keyed on (employee_id, work_date)."""

        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        raise NotImplementedError
