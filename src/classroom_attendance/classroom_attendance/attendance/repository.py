from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_student_and_date(self, *, section_id: int, student_id: int, class_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_checkin(self, *, section_id: int, student_id: int, class_date: date, checked_in_at: datetime) -> int:
        raise NotImplementedError
