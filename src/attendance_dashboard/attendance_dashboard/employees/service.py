from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_iso_date, today_utc
from ..common.validators import require_non_empty, require_positive_int
from ..core.constants import AVATAR_URL_TEMPLATE, MISSING_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..roles.repository import RoleRepository
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employee records (admin)."""

    def __init__(
        self,
        employees: EmployeeRepository,
        roles: RoleRepository,
        attendance: AttendanceRepository,
    ):
        self._employees = employees
        self._roles = roles
        self._attendance = attendance

    def list_with_roles(self) -> list[dict]:
        roles = {r.role_id: r for r in self._roles.list_all()}
        out: list[dict] = []
        for e in self._employees.list_all():
            role = roles.get(e.role_id) if e.role_id is not None else None
            out.append(
                {
                    "employee_id": e.employee_id,
                    "name": e.name,
                    "role_id": e.role_id,
                    "role_name": role.name if role else MISSING_LABEL,
                    "salary": role.salary if role else 0,
                    "joining_date": format_iso_date(e.joining_date) if e.joining_date else None,
                    "avatar_url": e.avatar_url,
                    "status": e.status.value,
                }
            )
        return out

    def _require_role(self, role_id) -> int:
        role_id = require_positive_int(role_id, "Role")
        if not self._roles.get_by_id(role_id):
            raise ValidationError("Selected role does not exist")
        return role_id

    def create_employee(self, *, name: str, role_id, joining_date: Optional[date] = None) -> int:
        name = require_non_empty(name, "Name")
        role_id = self._require_role(role_id)

        employee_id = self._employees.create(
            name=name,
            role_id=role_id,
            joining_date=joining_date or today_utc(),
            avatar_url=AVATAR_URL_TEMPLATE.format(seed=name),
            status=AttendanceStatus.PRESENT,
        )
        logger.info("Created employee %s (%s)", employee_id, name)
        return employee_id

    def update_employee(self, *, employee_id: int, name: str, role_id, joining_date: Optional[date] = None) -> None:
        current = self._employees.get_by_id(employee_id)
        if not current:
            raise NotFoundError("Employee not found")

        name = require_non_empty(name, "Name")
        role_id = self._require_role(role_id)
        joining = joining_date or current.joining_date or today_utc()

        if not self._employees.update(employee_id=employee_id, name=name, role_id=role_id, joining_date=joining):
            raise NotFoundError("Employee not found")

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        self._attendance.delete_for_employee(employee_id)
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)
