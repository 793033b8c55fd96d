from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, row_to_model
from .model import Role
from .repository import RoleRepository


def _to_role(r: dict) -> Role:
    return Role(role_id=int(r["role_id"]), name=str(r["name"]), salary=float(r["salary"]))


class MySQLRoleRepository(RoleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role_id, name, salary FROM roles ORDER BY name")
            return [row_to_model(r, _to_role) for r in fetchall(cur)]

    def get_by_id(self, role_id: int) -> Optional[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role_id, name, salary FROM roles WHERE role_id=%s", (int(role_id),))
            row = fetchone(cur)
            return row_to_model(row, _to_role) if row else None

    def create(self, *, name: str, salary: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO roles(name, salary) VALUES(%s,%s)", (name, salary))
            return int(cur.lastrowid)

    def delete_by_id(self, role_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM roles WHERE role_id=%s", (int(role_id),))
            return cur.rowcount > 0
