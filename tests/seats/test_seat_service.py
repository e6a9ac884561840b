from __future__ import annotations

from itertools import count
from typing import Optional

import pytest

from classroom_attendance.core.enums import SeatPlanStatus
from classroom_attendance.core.exceptions import NotEnrolledError, ValidationError
from classroom_attendance.schedules.model import Section
from classroom_attendance.seats.model import Seat, SeatCoordinate
from classroom_attendance.seats.service import SeatService


class InMemorySeats:
    def __init__(self):
        self.seats: list[Seat] = []
        self._ids = count(1)

    def list_all_for_section(self, section_id: int):
        return [s for s in self.seats if s.section_id == section_id]

    def list_for_section(self, section_id: int):
        return self.list_all_for_section(section_id)

    def get_for_student(self, *, section_id: int, student_id: int) -> Optional[Seat]:
        return next((s for s in self.seats if s.section_id == section_id and s.occupant_id == student_id), None)

    def get_at(self, *, section_id: int, coordinate: SeatCoordinate) -> Optional[Seat]:
        return next((s for s in self.seats if s.section_id == section_id and s.coordinate == coordinate), None)

    def create(self, *, section_id: int, student_id: int, coordinate: SeatCoordinate) -> Seat:
        seat = Seat(seat_id=next(self._ids), section_id=section_id, coordinate=coordinate, occupant_id=student_id)
        self.seats.append(seat)
        return seat

    def delete_for_student(self, *, section_id: int, student_id: int) -> bool:
        before = len(self.seats)
        self.seats = [s for s in self.seats if not (s.section_id == section_id and s.occupant_id == student_id)]
        return len(self.seats) != before


class InMemoryEnrollments:
    def __init__(self, by_student):
        self.by_student = by_student

    def list_section_ids_for_student(self, student_id: int):
        return self.by_student.get(student_id, [])


class InMemorySections:
    def __init__(self, sections):
        self.sections = {s.section_id: s for s in sections}

    def get_by_id(self, section_id: int):
        return self.sections.get(section_id)


@pytest.fixture
def seats() -> InMemorySeats:
    return InMemorySeats()


@pytest.fixture
def service(seats) -> SeatService:
    enrollments = InMemoryEnrollments({7: [1], 8: [1]})
    sections = InMemorySections([Section(section_id=1, section_name="IT-101 A", enrollment_count=2)])
    return SeatService(seats, enrollments, sections)


def test_pick_seat_by_display_id(service, seats):
    seat = service.pick_seat(section_id=1, student_id=7, coordinate="A2")

    assert seat.coordinate == SeatCoordinate(1, 3)
    assert seat.occupant_id == 7
    assert len(seats.seats) == 1


def test_pick_seat_moves_existing_seat(service, seats):
    service.pick_seat(section_id=1, student_id=7, coordinate=SeatCoordinate(0, 0))
    service.pick_seat(section_id=1, student_id=7, coordinate=SeatCoordinate(4, 2))

    assert [s.coordinate for s in seats.seats] == [SeatCoordinate(4, 2)]


def test_pick_own_seat_again_is_a_noop(service, seats):
    first = service.pick_seat(section_id=1, student_id=7, coordinate="W1")
    again = service.pick_seat(section_id=1, student_id=7, coordinate="W1")

    assert again == first
    assert len(seats.seats) == 1


def test_pick_taken_seat_rejected(service):
    service.pick_seat(section_id=1, student_id=7, coordinate="W1")

    with pytest.raises(ValidationError, match="already taken"):
        service.pick_seat(section_id=1, student_id=8, coordinate="W1")


@pytest.mark.parametrize("coordinate", ["Z1", "W9", SeatCoordinate(7, 0), SeatCoordinate(0, 4)])
def test_pick_outside_grid_rejected(service, coordinate):
    with pytest.raises(ValidationError):
        service.pick_seat(section_id=1, student_id=7, coordinate=coordinate)


def test_pick_requires_enrollment(service):
    with pytest.raises(NotEnrolledError):
        service.pick_seat(section_id=1, student_id=99, coordinate="W1")


def test_vacate(service, seats):
    service.pick_seat(section_id=1, student_id=7, coordinate="C3")
    service.vacate(section_id=1, student_id=7)

    assert seats.seats == []
    with pytest.raises(ValidationError):
        service.vacate(section_id=1, student_id=7)


def test_load_plan(service):
    service.pick_seat(section_id=1, student_id=8, coordinate="W1")

    result = service.load_plan(section_id=1, student_id=7)

    assert result.status == SeatPlanStatus.SUCCESS
    assert result.snapshot.occupied_count == 1
    assert result.own_seat is None


def test_load_plan_unknown_section(service):
    with pytest.raises(ValidationError, match="Section not found"):
        service.load_plan(section_id=5, student_id=7)
