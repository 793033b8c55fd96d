from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, row_to_model
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, role_id, joining_date, avatar_url, status"


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=str(r["name"]),
        role_id=int(r["role_id"]) if r.get("role_id") is not None else None,
        joining_date=r.get("joining_date"),
        avatar_url=r.get("avatar_url") or "",
        status=AttendanceStatus(r["status"]),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name")
            return [row_to_model(r, _to_employee) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            row = fetchone(cur)
            return row_to_model(row, _to_employee) if row else None

    def create(
        self,
        *,
        name: str,
        role_id: int,
        joining_date: date,
        avatar_url: str,
        status: AttendanceStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, role_id, joining_date, avatar_url, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (name, int(role_id), joining_date, avatar_url, status.value),
            )
            return int(cur.lastrowid)

    def update(self, *, employee_id: int, name: str, role_id: int, joining_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, role_id=%s, joining_date=%s
                WHERE employee_id=%s
                """,
                (name, int(role_id), joining_date, int(employee_id)),
            )
            # MySQL reports 0 affected rows when values are unchanged.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM employees WHERE employee_id=%s", (int(employee_id),))
            return fetchone(cur) is not None

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0

    def count_by_role(self, role_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees WHERE role_id=%s", (int(role_id),))
            row = fetchone(cur)
            return int(row["n"]) if row else 0

    def set_status(self, employee_ids: Iterable[int], status: AttendanceStatus) -> None:
        ids = [int(i) for i in employee_ids]
        if not ids:
            return
        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET status=%s WHERE employee_id IN ({placeholders})",
                (status.value, *ids),
            )
