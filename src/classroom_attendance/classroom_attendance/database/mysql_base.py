from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import mysql.connector

from ..core.exceptions import LookupFailure, PermissionDenied
from .connection import DatabaseConnection

# ER_DBACCESS_DENIED_ERROR, ER_ACCESS_DENIED_ERROR, ER_TABLEACCESS_DENIED_ERROR, ER_COLUMNACCESS_DENIED_ERROR
ACCESS_DENIED_ERRNOS = frozenset({1044, 1045, 1142, 1143})


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def lookup_errors(what: str) -> Iterator[None]:
    """Translate connector errors raised while reading ``what`` into lookup failures."""

    try:
        yield
    except mysql.connector.Error as e:
        if getattr(e, "errno", None) in ACCESS_DENIED_ERRNOS:
            raise PermissionDenied(f"No permission to read {what}: {e.msg}", status=403) from e
        raise LookupFailure(f"Failed to read {what}: {e}") from e


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
