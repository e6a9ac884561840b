from __future__ import annotations

import logging
from typing import Union

from ..common.validators import require_positive_id
from ..core.constants import DISPLAY_GRID_COLUMNS, DISPLAY_GRID_ROWS
from ..core.exceptions import NotEnrolledError, ValidationError
from ..enrollments.repository import EnrollmentRepository
from ..schedules.repository import SectionRepository
from .grid import SeatGridModel, from_display_id
from .loader import SeatPlanLoader, SeatPlanResult
from .model import Seat, SeatCoordinate
from .repository import SeatRepository

logger = logging.getLogger(__name__)


class SeatService:
    def __init__(
        self,
        seats: SeatRepository,
        enrollments: EnrollmentRepository,
        sections: SectionRepository,
        *,
        loader: SeatPlanLoader | None = None,
        rows: int = DISPLAY_GRID_ROWS,
        columns: int = DISPLAY_GRID_COLUMNS,
    ):
        self._seats = seats
        self._enrollments = enrollments
        self._sections = sections
        self._loader = loader or SeatPlanLoader(seats, enrollments)
        self._layout = SeatGridModel(rows=rows, columns=columns)

    @property
    def rows(self) -> int:
        return self._layout.rows

    @property
    def columns(self) -> int:
        return self._layout.columns

    def load_plan(self, *, section_id: int, student_id: int) -> SeatPlanResult:
        section = self._sections.get_by_id(require_positive_id(section_id, "Section"))
        if not section:
            raise ValidationError("Section not found")
        return self._loader.load(section, require_positive_id(student_id, "Student"))

    def _resolve(self, coordinate: Union[SeatCoordinate, str]) -> SeatCoordinate:
        if isinstance(coordinate, str):
            parsed = from_display_id(coordinate.strip())
            if parsed is None:
                raise ValidationError(f"Invalid seat: {coordinate}")
            coordinate = parsed
        if not self._layout.contains(coordinate):
            raise ValidationError("Seat is outside the seat plan")
        return coordinate

    def _require_enrolled(self, section_id: int, student_id: int) -> None:
        if section_id not in set(self._enrollments.list_section_ids_for_student(student_id)):
            raise NotEnrolledError("Student is not enrolled in this section")

    def pick_seat(self, *, section_id: int, student_id: int, coordinate: Union[SeatCoordinate, str]) -> Seat:
        section_id = require_positive_id(section_id, "Section")
        student_id = require_positive_id(student_id, "Student")
        coordinate = self._resolve(coordinate)
        self._require_enrolled(section_id, student_id)

        taken = self._seats.get_at(section_id=section_id, coordinate=coordinate)
        if taken and taken.is_taken:
            if taken.occupant_id == student_id:
                return taken
            raise ValidationError("Seat position is already taken")

        # A student holds at most one seat per section.
        self._seats.delete_for_student(section_id=section_id, student_id=student_id)
        seat = self._seats.create(section_id=section_id, student_id=student_id, coordinate=coordinate)
        logger.info("Student %s picked seat %s in section %s", student_id, coordinate, section_id)
        return seat

    def vacate(self, *, section_id: int, student_id: int) -> None:
        section_id = require_positive_id(section_id, "Section")
        student_id = require_positive_id(student_id, "Student")
        if not self._seats.delete_for_student(section_id=section_id, student_id=student_id):
            raise ValidationError("You do not have a seat in this section")
