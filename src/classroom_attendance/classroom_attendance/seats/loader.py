from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.enums import LookupFailureKind, SeatPlanOrigin, SeatPlanStatus
from ..core.exceptions import classify_failure
from ..enrollments.repository import EnrollmentRepository
from ..schedules.model import Section
from .fallback import FallbackReconstructor
from .model import Seat, SeatPlanSnapshot
from .repository import SeatRepository

logger = logging.getLogger(__name__)

NOT_ENROLLED_MESSAGE = "You are not enrolled in this section. Please enroll before viewing the seat plan."
ENROLLMENT_UNVERIFIED_MESSAGE = "Could not verify enrollment. Please try again later."
SEATS_UNAVAILABLE_MESSAGE = "Unable to load seats for this section."


@dataclass(frozen=True)
class SeatPlanResult:
    status: SeatPlanStatus
    transitions: Tuple[SeatPlanStatus, ...]
    snapshot: Optional[SeatPlanSnapshot] = None
    own_seat: Optional[Seat] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == SeatPlanStatus.SUCCESS


class SeatPlanLoader:
    """Load a section's seat plan for a student.

    IDLE -> LOADING -> SUCCESS(primary) | ATTEMPT_SECONDARY
    ATTEMPT_SECONDARY -> SUCCESS(secondary) | ATTEMPT_FALLBACK | ERROR
    ATTEMPT_FALLBACK -> SUCCESS(synthetic grid)

    The fallback is only taken when the secondary listing failed for a
    permission reason; any other failure ends in ERROR.
    """

    def __init__(
        self,
        seats: SeatRepository,
        enrollments: EnrollmentRepository,
        *,
        reconstructor: FallbackReconstructor | None = None,
    ):
        self._seats = seats
        self._enrollments = enrollments
        self._reconstructor = reconstructor or FallbackReconstructor(seats)

    def load(self, section: Section, student_id: int) -> SeatPlanResult:
        trail: List[SeatPlanStatus] = [SeatPlanStatus.IDLE, SeatPlanStatus.LOADING]

        try:
            enrolled = section.section_id in set(self._enrollments.list_section_ids_for_student(student_id))
        except Exception as e:
            logger.warning("Enrollment lookup for student %s failed: %s", student_id, e)
            return self._error(trail, ENROLLMENT_UNVERIFIED_MESSAGE)
        if not enrolled:
            return self._error(trail, NOT_ENROLLED_MESSAGE)

        try:
            seats = self._seats.list_all_for_section(section.section_id)
            return self._success(trail, section, student_id, seats, SeatPlanOrigin.PRIMARY)
        except Exception as e:
            logger.info("Primary seat listing for section %s failed: %s", section.section_id, e)

        trail.append(SeatPlanStatus.ATTEMPT_SECONDARY)
        try:
            seats = self._seats.list_for_section(section.section_id)
            return self._success(trail, section, student_id, seats, SeatPlanOrigin.SECONDARY)
        except Exception as e:
            if classify_failure(e) != LookupFailureKind.PERMISSION_DENIED:
                logger.warning("Seat listing for section %s failed: %s", section.section_id, e)
                return self._error(trail, SEATS_UNAVAILABLE_MESSAGE)
            logger.info("Seat listing for section %s denied, rebuilding: %s", section.section_id, e)

        trail.append(SeatPlanStatus.ATTEMPT_FALLBACK)
        snapshot = self._reconstructor.reconstruct(
            section_id=section.section_id,
            requester_id=student_id,
            enrollment_count=section.enrollment_count,
        )
        own = next((s for s in snapshot.seats if s.occupant_id == student_id), None)
        trail.append(SeatPlanStatus.SUCCESS)
        return SeatPlanResult(
            status=SeatPlanStatus.SUCCESS,
            transitions=tuple(trail),
            snapshot=snapshot,
            own_seat=own,
        )

    def _success(
        self,
        trail: List[SeatPlanStatus],
        section: Section,
        student_id: int,
        seats,
        origin: SeatPlanOrigin,
    ) -> SeatPlanResult:
        snapshot = SeatPlanSnapshot(section_id=section.section_id, seats=tuple(seats), origin=origin)
        trail.append(SeatPlanStatus.SUCCESS)
        return SeatPlanResult(
            status=SeatPlanStatus.SUCCESS,
            transitions=tuple(trail),
            snapshot=snapshot,
            own_seat=self._own_seat(snapshot, student_id),
        )

    def _own_seat(self, snapshot: SeatPlanSnapshot, student_id: int) -> Optional[Seat]:
        for seat in snapshot.seats:
            if seat.occupant_id == student_id:
                return seat
        try:
            return self._seats.get_for_student(section_id=snapshot.section_id, student_id=student_id)
        except Exception as e:
            logger.debug("Own seat lookup for student %s failed: %s", student_id, e)
            return None

    @staticmethod
    def _error(trail: List[SeatPlanStatus], message: str) -> SeatPlanResult:
        trail.append(SeatPlanStatus.ERROR)
        return SeatPlanResult(status=SeatPlanStatus.ERROR, transitions=tuple(trail), message=message)
