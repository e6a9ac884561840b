from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Seat, SeatCoordinate


class SeatLookup(Protocol):
    def get_for_student(self, *, section_id: int, student_id: int) -> Optional[Seat]:
        """Seat held by a student in a section, or None.

        Raises LookupFailure (or PermissionDenied) when the read fails.
        """

        raise NotImplementedError


class SeatRepository(SeatLookup, Protocol):
    def list_all_for_section(self, section_id: int) -> Sequence[Seat]:
        """Full seat listing with occupants (primary source)."""

        raise NotImplementedError

    def list_for_section(self, section_id: int) -> Sequence[Seat]:
        """Plain seat listing (secondary source)."""

        raise NotImplementedError

    def get_at(self, *, section_id: int, coordinate: SeatCoordinate) -> Optional[Seat]:
        raise NotImplementedError

    def create(self, *, section_id: int, student_id: int, coordinate: SeatCoordinate) -> Seat:
        raise NotImplementedError

    def delete_for_student(self, *, section_id: int, student_id: int) -> bool:
        raise NotImplementedError
