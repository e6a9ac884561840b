from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, lookup_errors
from .model import Seat, SeatCoordinate
from .repository import SeatRepository


def _to_seat(r: Dict[str, Any]) -> Seat:
    student_id = r.get("student_id")
    return Seat(
        seat_id=int(r["id"]),
        section_id=int(r["section_id"]),
        coordinate=SeatCoordinate(row=int(r["seat_row"]), column=int(r["seat_column"])),
        occupant_id=int(student_id) if student_id is not None else None,
    )


class MySQLSeatRepository(SeatRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all_for_section(self, section_id: int) -> Sequence[Seat]:
        # Joins student records; restricted accounts usually lack SELECT on students.
        with lookup_errors("seat plan"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT se.id, se.section_id, se.seat_row, se.seat_column, st.id AS student_id
                FROM seats se
                LEFT JOIN students st ON st.id = se.student_id
                WHERE se.section_id=%s
                ORDER BY se.seat_row, se.seat_column
                """,
                (int(section_id),),
            )
            return [_to_seat(r) for r in fetchall(cur)]

    def list_for_section(self, section_id: int) -> Sequence[Seat]:
        with lookup_errors("seats"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, section_id, seat_row, seat_column, student_id
                FROM seats
                WHERE section_id=%s
                ORDER BY seat_row, seat_column
                """,
                (int(section_id),),
            )
            return [_to_seat(r) for r in fetchall(cur)]

    def get_for_student(self, *, section_id: int, student_id: int) -> Optional[Seat]:
        with lookup_errors("student seat"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, section_id, seat_row, seat_column, student_id
                FROM seats
                WHERE section_id=%s AND student_id=%s
                """,
                (int(section_id), int(student_id)),
            )
            r = fetchone(cur)
            return _to_seat(r) if r else None

    def get_at(self, *, section_id: int, coordinate: SeatCoordinate) -> Optional[Seat]:
        with lookup_errors("seat"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, section_id, seat_row, seat_column, student_id
                FROM seats
                WHERE section_id=%s AND seat_row=%s AND seat_column=%s
                """,
                (int(section_id), int(coordinate.row), int(coordinate.column)),
            )
            r = fetchone(cur)
            return _to_seat(r) if r else None

    def create(self, *, section_id: int, student_id: int, coordinate: SeatCoordinate) -> Seat:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO seats(section_id, student_id, seat_row, seat_column)
                VALUES(%s,%s,%s,%s)
                """,
                (int(section_id), int(student_id), int(coordinate.row), int(coordinate.column)),
            )
            seat_id = int(cur.lastrowid)
        return Seat(seat_id=seat_id, section_id=int(section_id), coordinate=coordinate, occupant_id=int(student_id))

    def delete_for_student(self, *, section_id: int, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM seats WHERE section_id=%s AND student_id=%s",
                (int(section_id), int(student_id)),
            )
            return cur.rowcount > 0
