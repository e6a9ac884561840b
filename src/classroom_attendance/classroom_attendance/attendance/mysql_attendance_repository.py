from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_student_and_date(self, *, section_id: int, student_id: int, class_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, section_id, student_id, class_date, checked_in_at
                FROM attendance
                WHERE section_id=%s AND student_id=%s AND class_date=%s
                """,
                (int(section_id), int(student_id), class_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AttendanceRecord(
                attendance_id=int(r["id"]),
                section_id=int(r["section_id"]),
                student_id=int(r["student_id"]),
                class_date=r["class_date"],
                checked_in_at=r["checked_in_at"],
            )

    def create_checkin(self, *, section_id: int, student_id: int, class_date: date, checked_in_at: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(section_id, student_id, class_date, checked_in_at)
                VALUES(%s,%s,%s,%s)
                """,
                (int(section_id), int(student_id), class_date, checked_in_at),
            )
            return int(cur.lastrowid)
