from __future__ import annotations

import mysql.connector
import pytest

from classroom_attendance.core.enums import LookupFailureKind
from classroom_attendance.core.exceptions import LookupFailure, PermissionDenied, classify_failure
from classroom_attendance.database.mysql_base import lookup_errors
from classroom_attendance.seats.mysql_seat_repository import MySQLSeatRepository


class FakeCursor:
    def __init__(self, error=None, rows=()):
        self.error = error
        self.rows = list(rows)

    def execute(self, sql, params=None):
        if self.error:
            raise self.error

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.rolled_back = False

    def cursor(self, dictionary=True):
        return self._cursor

    def commit(self):
        pass

    def rollback(self):
        self.rolled_back = True

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self, cursor):
        self.connection = FakeConnection(cursor)

    def connect(self):
        return self.connection


def test_access_denied_becomes_permission_denied():
    with pytest.raises(PermissionDenied) as info:
        with lookup_errors("seats"):
            raise mysql.connector.errors.ProgrammingError(msg="SELECT command denied", errno=1142)

    assert info.value.status == 403
    assert classify_failure(info.value) == LookupFailureKind.PERMISSION_DENIED


def test_other_connector_errors_become_lookup_failures():
    with pytest.raises(LookupFailure) as info:
        with lookup_errors("seats"):
            raise mysql.connector.errors.OperationalError(msg="Lost connection", errno=2013)

    assert not isinstance(info.value, PermissionDenied)
    assert classify_failure(info.value) == LookupFailureKind.OTHER


def test_seat_repository_maps_rows_and_errors():
    rows = [
        {"id": 3, "section_id": 1, "seat_row": 0, "seat_column": 2, "student_id": 7},
        {"id": 4, "section_id": 1, "seat_row": 1, "seat_column": 0, "student_id": None},
    ]
    repo = MySQLSeatRepository(FakeConnFactory(FakeCursor(rows=rows)))

    seats = repo.list_for_section(1)

    assert [s.seat_id for s in seats] == [3, 4]
    assert seats[0].occupant_id == 7
    assert seats[1].is_taken is False

    factory = FakeConnFactory(FakeCursor(error=mysql.connector.errors.ProgrammingError(msg="denied", errno=1142)))
    with pytest.raises(PermissionDenied):
        MySQLSeatRepository(factory).list_all_for_section(1)
    assert factory.connection.rolled_back is True
