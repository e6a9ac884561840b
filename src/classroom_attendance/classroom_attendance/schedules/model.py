from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..core.exceptions import ParseFailure


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time with minute precision, ordered by total minutes."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise ParseFailure(f"Invalid time of day: {self.hour}:{self.minute}")

    @property
    def total_minutes(self) -> int:
        return self.hour * 60 + self.minute

    @classmethod
    def from_time(cls, value: time) -> "TimeOfDay":
        return cls(value.hour, value.minute)

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class ScheduleEntry:
    """One weekly meeting of a class section.

    ``day_of_week`` follows ISO numbering (Monday=1 .. Sunday=7).
    """

    day_of_week: int
    start_time: TimeOfDay
    end_time: TimeOfDay
    room: str = ""
    kind: str = ""
    schedule_id: Optional[int] = None
    section_id: Optional[int] = None

    @property
    def is_valid(self) -> bool:
        return 1 <= self.day_of_week <= 7 and self.start_time < self.end_time


@dataclass(frozen=True)
class Section:
    section_id: int
    section_name: str
    course_name: str = ""
    enrollment_count: int = 0
    schedule: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.section_name or self.course_name or f"Section #{self.section_id}"
