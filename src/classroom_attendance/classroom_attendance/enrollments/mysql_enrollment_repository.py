from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, lookup_errors
from .repository import EnrollmentRepository


class MySQLEnrollmentRepository(EnrollmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_section_ids_for_student(self, student_id: int) -> Sequence[int]:
        with lookup_errors("enrollments"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT section_id FROM enrollments WHERE student_id=%s ORDER BY section_id",
                (int(student_id),),
            )
            return [int(r["section_id"]) for r in fetchall(cur)]
