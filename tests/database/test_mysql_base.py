from __future__ import annotations

from datetime import date

import mysql.connector
import pytest

from src.attendance_dashboard.attendance_dashboard.attendance.model import AttendanceRecord
from src.attendance_dashboard.attendance_dashboard.attendance.mysql_attendance_repository import (
    MySQLAttendanceRepository,
)
from src.attendance_dashboard.attendance_dashboard.core.enums import AttendanceStatus
from src.attendance_dashboard.attendance_dashboard.core.exceptions import StoreError
from src.attendance_dashboard.attendance_dashboard.database.mysql_base import db_cursor, row_to_model


class FakeCursor:
    def __init__(self, rows=None, fail_with=None):
        self.rows = rows or []
        self.fail_with = fail_with
        self.executed = []
        self.closed = False
        self.rowcount = 0

    def execute(self, sql, params=None):
        if self.fail_with:
            raise self.fail_with
        self.executed.append((sql, params))

    def executemany(self, sql, seq):
        if self.fail_with:
            raise self.fail_with
        self.executed.append((sql, list(seq)))

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, connect_error=None):
        self.conn = conn
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error:
            raise self.connect_error
        return self.conn


def test_commit_on_success():
    conn = FakeConnection(FakeCursor())
    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and not conn.rolled_back
    assert conn.closed and conn._cursor.closed


def test_unreachable_store_raises_store_error():
    factory = FakeFactory(connect_error=mysql.connector.errors.InterfaceError("timed out"))
    with pytest.raises(StoreError):
        with db_cursor(factory):
            pass


def test_driver_error_rolls_back_and_wraps():
    conn = FakeConnection(FakeCursor(fail_with=mysql.connector.errors.DatabaseError("boom")))
    with pytest.raises(StoreError):
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("SELECT 1")

    assert conn.rolled_back and not conn.committed
    assert conn.closed


def test_other_errors_roll_back_and_propagate():
    conn = FakeConnection(FakeCursor())
    with pytest.raises(RuntimeError):
        with db_cursor(FakeFactory(conn)):
            raise RuntimeError("bug")
    assert conn.rolled_back


def test_malformed_row_becomes_store_error():
    with pytest.raises(StoreError):
        row_to_model({"status": "late"}, lambda r: AttendanceStatus(r["status"]))
    with pytest.raises(StoreError):
        row_to_model({}, lambda r: r["missing"])


def test_upsert_many_single_statement_on_unique_key():
    cur = FakeCursor()
    repo = MySQLAttendanceRepository(FakeFactory(FakeConnection(cur)))
    repo.upsert_many(
        [
            AttendanceRecord(employee_id=1, work_date=date(2024, 1, 16), status=AttendanceStatus.PRESENT),
            AttendanceRecord(employee_id=2, work_date=date(2024, 1, 16), status=AttendanceStatus.ABSENT),
        ]
    )

    assert len(cur.executed) == 1
    sql, params = cur.executed[0]
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params == [(1, date(2024, 1, 16), "present"), (2, date(2024, 1, 16), "absent")]


def test_list_for_range_maps_rows():
    cur = FakeCursor(rows=[{"employee_id": 3, "work_date": date(2024, 1, 2), "status": "half-day"}])
    repo = MySQLAttendanceRepository(FakeFactory(FakeConnection(cur)))

    records = repo.list_for_range(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31), employee_id=3)

    assert [(r.employee_id, r.status) for r in records] == [(3, AttendanceStatus.HALF_DAY)]
    assert cur.executed[0][1] == (date(2024, 1, 1), date(2024, 1, 31), 3)
