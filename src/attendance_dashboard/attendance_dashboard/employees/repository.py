from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): services depend on this interface, never on a concrete DB.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        role_id: int,
        joining_date: date,
        avatar_url: str,
        status: AttendanceStatus,
    ) -> int:
        raise NotImplementedError

    def update(self, *, employee_id: int, name: str, role_id: int, joining_date: date) -> bool:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def count_by_role(self, role_id: int) -> int:
        raise NotImplementedError

    def set_status(self, employee_ids: Iterable[int], status: AttendanceStatus) -> None:
        raise NotImplementedError
