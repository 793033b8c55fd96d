from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Employee:
    """Employee record.

    `status` caches the last known attendance state; the attendance table is the
    source of truth. `joining_date` is None only for legacy rows.
    """

    employee_id: int
    name: str
    role_id: Optional[int]
    joining_date: Optional[date]
    avatar_url: str
    status: AttendanceStatus = AttendanceStatus.PRESENT

    def has_joined_by(self, day: date) -> bool:
        return self.joining_date is None or day >= self.joining_date
