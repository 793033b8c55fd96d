from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.exceptions import StoreError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield (conn, cursor) inside one transaction.

    Commits on success and rolls back on any error. Driver errors (including
    connect timeouts) are re-raised as StoreError.
    """

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Record store unavailable: %s", e)
        raise StoreError("Record store is unavailable, please try again") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        logger.error("Record store query failed: %s", e)
        raise StoreError("Record store request failed") from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def row_to_model(row: Dict[str, Any], build):
    """Build a domain object from a row, rejecting malformed rows."""

    try:
        return build(row)
    except (KeyError, TypeError, ValueError) as e:
        raise StoreError(f"Malformed row from record store: {e}") from e
