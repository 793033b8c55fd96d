from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty, require_non_negative_number
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Role
from .repository import RoleRepository

logger = logging.getLogger(__name__)


class RoleService:
    """Use case: manage roles and their salaries (admin)."""

    def __init__(self, roles: RoleRepository, employees: EmployeeRepository):
        self._roles = roles
        self._employees = employees

    def list_roles(self) -> Sequence[Role]:
        return self._roles.list_all()

    def create_role(self, *, name: str, salary) -> int:
        name = require_non_empty(name, "Role name")
        salary = require_non_negative_number(salary, "Salary")
        role_id = self._roles.create(name=name, salary=salary)
        logger.info("Created role %s (%s)", role_id, name)
        return role_id

    def delete_role(self, role_id: int) -> None:
        if not self._roles.get_by_id(role_id):
            raise NotFoundError("Role not found")

        in_use = self._employees.count_by_role(role_id)
        if in_use:
            raise ValidationError(f"Role is assigned to {in_use} employee(s); reassign them before deleting")

        if not self._roles.delete_by_id(role_id):
            raise NotFoundError("Role not found")
        logger.info("Deleted role %s", role_id)
