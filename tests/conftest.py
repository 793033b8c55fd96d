from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

import pytest
from werkzeug.security import generate_password_hash

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.employees.model import Employee
from src.attendance_dashboard.attendance_dashboard.roles.model import Role
from src.attendance_dashboard.attendance_dashboard.users.model import User


class InMemoryRoles:
    def __init__(self, roles: Iterable[Role] = ()):
        self._roles: dict[int, Role] = {r.role_id: r for r in roles}
        self._next_id = max(self._roles, default=0) + 1

    def list_all(self):
        return sorted(self._roles.values(), key=lambda r: r.name)

    def get_by_id(self, role_id: int) -> Optional[Role]:
        return self._roles.get(role_id)

    def create(self, *, name: str, salary: float) -> int:
        role_id = self._next_id
        self._next_id += 1
        self._roles[role_id] = Role(role_id=role_id, name=name, salary=salary)
        return role_id

    def delete_by_id(self, role_id: int) -> bool:
        return self._roles.pop(role_id, None) is not None


class InMemoryEmployees:
    def __init__(self, employees: Iterable[Employee] = ()):
        self._employees: dict[int, Employee] = {e.employee_id: e for e in employees}
        self._next_id = max(self._employees, default=0) + 1
        self.status_updates: list[tuple[list[int], AttendanceStatus]] = []

    def list_all(self):
        return sorted(self._employees.values(), key=lambda e: e.name)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def create(self, *, name, role_id, joining_date, avatar_url, status) -> int:
        employee_id = self._next_id
        self._next_id += 1
        self._employees[employee_id] = Employee(
            employee_id=employee_id,
            name=name,
            role_id=role_id,
            joining_date=joining_date,
            avatar_url=avatar_url,
            status=status,
        )
        return employee_id

    def update(self, *, employee_id, name, role_id, joining_date) -> bool:
        current = self._employees.get(employee_id)
        if not current:
            return False
        self._employees[employee_id] = Employee(
            employee_id=employee_id,
            name=name,
            role_id=role_id,
            joining_date=joining_date,
            avatar_url=current.avatar_url,
            status=current.status,
        )
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._employees.pop(employee_id, None) is not None

    def count_by_role(self, role_id: int) -> int:
        return sum(1 for e in self._employees.values() if e.role_id == role_id)

    def set_status(self, employee_ids, status: AttendanceStatus) -> None:
        ids = list(employee_ids)
        self.status_updates.append((ids, status))
        for i in ids:
            e = self._employees[i]
            self._employees[i] = Employee(
                employee_id=e.employee_id,
                name=e.name,
                role_id=e.role_id,
                joining_date=e.joining_date,
                avatar_url=e.avatar_url,
                status=status,
            )


class InMemoryAttendance:
    """Keyed on (employee_id, work_date) like the real unique index."""

    def __init__(self, records: Iterable[AttendanceRecord] = ()):
        self._by_key: dict[tuple[int, date], AttendanceRecord] = {}
        self.upsert_calls = 0
        for r in records:
            self._by_key[r.key] = r

    def all(self) -> list[AttendanceRecord]:
        return sorted(self._by_key.values(), key=lambda r: (r.work_date, r.employee_id))

    def list_for_range(self, *, start_date, end_date, employee_id=None):
        return [
            r
            for r in self.all()
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == employee_id)
        ]

    def list_recent_for_employee(self, employee_id, *, until, limit):
        items = [r for r in self.all() if r.employee_id == employee_id and r.work_date <= until]
        items.sort(key=lambda r: r.work_date, reverse=True)
        return items[:limit]

    def upsert_many(self, records) -> None:
        self.upsert_calls += 1
        for r in records:
            self._by_key[r.key] = r

    def delete_for_employee(self, employee_id: int) -> int:
        keys = [k for k in self._by_key if k[0] == employee_id]
        for k in keys:
            del self._by_key[k]
        return len(keys)


class InMemoryUsers:
    def __init__(self, users: Iterable[User] = ()):
        self._users: dict[int, User] = {u.user_id: u for u in users}
        self._next_id = max(self._users, default=0) + 1

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    def create_user(self, *, email, full_name, password_hash, avatar_url, is_admin=False) -> int:
        user_id = self._next_id
        self._next_id += 1
        self._users[user_id] = User(
            user_id=user_id,
            email=email,
            full_name=full_name,
            password_hash=password_hash,
            avatar_url=avatar_url,
            is_admin=is_admin,
        )
        return user_id


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 1, 17)


@pytest.fixture
def engineer_role() -> Role:
    return Role(role_id=1, name="Software Engineer", salary=3100)


@pytest.fixture
def roles_repo(engineer_role) -> InMemoryRoles:
    return InMemoryRoles([engineer_role])


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee(
                employee_id=1,
                name="John Doe",
                role_id=1,
                joining_date=date(2024, 1, 15),
                avatar_url="",
                status=AttendanceStatus.PRESENT,
            ),
            Employee(
                employee_id=2,
                name="Jane Smith",
                role_id=1,
                joining_date=date(2023, 6, 1),
                avatar_url="",
                status=AttendanceStatus.PRESENT,
            ),
            Employee(
                employee_id=3,
                name="Late Joiner",
                role_id=1,
                joining_date=date(2024, 2, 1),
                avatar_url="",
                status=AttendanceStatus.PRESENT,
            ),
        ]
    )


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def admin_password() -> str:
    return "right-pass"


@pytest.fixture
def users_repo(admin_password) -> InMemoryUsers:
    return InMemoryUsers(
        [
            User(
                user_id=1,
                email="admin@example.com",
                full_name="Admin",
                password_hash=generate_password_hash(admin_password),
                is_admin=True,
            )
        ]
    )
