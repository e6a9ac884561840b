from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.exceptions import ParseFailure
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, lookup_errors
from .model import ScheduleEntry, Section
from .parsing import schedule_entry_from_record
from .repository import ScheduleRepository, SectionRepository

logger = logging.getLogger(__name__)


class MySQLSectionRepository(SectionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, section_id: int) -> Optional[Section]:
        with lookup_errors("section"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.id AS section_id, s.section_name, c.course_name, c.schedule,
                       (SELECT COUNT(*) FROM enrollments e WHERE e.section_id = s.id) AS enrollment_count
                FROM sections s
                JOIN courses c ON c.id = s.course_id
                WHERE s.id=%s
                """,
                (int(section_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Section(
                section_id=int(r["section_id"]),
                section_name=r.get("section_name") or "",
                course_name=r.get("course_name") or "",
                enrollment_count=int(r.get("enrollment_count") or 0),
                schedule=r.get("schedule"),
            )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_section(self, section_id: int) -> Sequence[ScheduleEntry]:
        with lookup_errors("schedules"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, section_id, day_of_week, time_start, time_end, schedule_type, room
                FROM schedules
                WHERE section_id=%s
                ORDER BY day_of_week, time_start
                """,
                (int(section_id),),
            )
            rows = fetchall(cur)

        entries = []
        for r in rows:
            try:
                entries.append(schedule_entry_from_record(r))
            except ParseFailure as e:
                logger.debug("Ignoring unreadable schedule row %s: %s", r.get("id"), e)
        return entries
