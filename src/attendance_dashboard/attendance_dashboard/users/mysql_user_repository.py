from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, row_to_model
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, email, full_name, password_hash, avatar_url, is_admin"


def _to_user(row: dict) -> User:
    return User(
        user_id=int(row["user_id"]),
        email=row["email"],
        full_name=row["full_name"],
        password_hash=row["password_hash"],
        avatar_url=row.get("avatar_url") or "",
        is_admin=bool(row.get("is_admin", False)),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return row_to_model(row, _to_user) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE email=%s", (email,))
            row = fetchone(cur)
            return row_to_model(row, _to_user) if row else None

    def create_user(
        self,
        *,
        email: str,
        full_name: str,
        password_hash: str,
        avatar_url: str,
        is_admin: bool = False,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(email, full_name, password_hash, avatar_url, is_admin)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (email, full_name, password_hash, avatar_url, int(bool(is_admin))),
            )
            return int(cur.lastrowid)
