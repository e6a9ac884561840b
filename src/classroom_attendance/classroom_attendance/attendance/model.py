from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's check-in to one section on one day."""

    attendance_id: int
    section_id: int
    student_id: int
    class_date: date
    checked_in_at: datetime
