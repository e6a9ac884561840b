from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import Clock, SystemClock
from ..common.validators import require_positive_id
from ..core.constants import QR_ATTENDANCE_PREFIX
from ..core.exceptions import LookupFailure, NotEnrolledError, ValidationError
from ..enrollments.repository import EnrollmentRepository
from ..schedules.service import EligibilityService
from .qr import parse_qr_payload
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CheckInResult:
    attendance_id: int
    section_id: int
    section_name: str
    checked_in_at: datetime


class CheckInService:
    """QR check-in: payload -> enrollment -> eligibility window -> record."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        enrollments: EnrollmentRepository,
        eligibility: EligibilityService,
        *,
        clock: Clock | None = None,
        qr_prefix: str = QR_ATTENDANCE_PREFIX,
    ):
        self._attendance = attendance
        self._enrollments = enrollments
        self._eligibility = eligibility
        self._clock = clock or SystemClock()
        self._qr_prefix = qr_prefix

    def _require_enrolled(self, section_id: int, student_id: int) -> None:
        try:
            section_ids = set(self._enrollments.list_section_ids_for_student(student_id))
        except LookupFailure as e:
            logger.warning("Enrollment lookup for student %s failed: %s", student_id, e)
            raise ValidationError("Could not verify enrollment") from e
        if section_id not in section_ids:
            raise NotEnrolledError("You are not enrolled in this section")

    def check_in(self, student_id: int, payload: str, *, now: Optional[datetime] = None) -> CheckInResult:
        now = now or self._clock.now()
        student_id = require_positive_id(student_id, "Student")
        section_id = parse_qr_payload(payload, prefix=self._qr_prefix)

        self._require_enrolled(section_id, student_id)

        window = self._eligibility.check(section_id, now=now)
        if not window.eligible:
            raise ValidationError("Check-in is only allowed during class time")

        existing = self._attendance.get_for_student_and_date(
            section_id=section_id,
            student_id=student_id,
            class_date=now.date(),
        )
        if existing:
            raise ValidationError("Attendance already recorded for this class today")

        attendance_id = self._attendance.create_checkin(
            section_id=section_id,
            student_id=student_id,
            class_date=now.date(),
            checked_in_at=now,
        )
        logger.info("Student %s checked in to section %s", student_id, section_id)
        return CheckInResult(
            attendance_id=attendance_id,
            section_id=section_id,
            section_name=window.section_name,
            checked_in_at=now,
        )
