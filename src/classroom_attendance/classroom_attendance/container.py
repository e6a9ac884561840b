from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import CheckInService
from .common.datetime_utils import Clock, SystemClock
from .core.constants import (
    DEFAULT_BUFFER_MINUTES,
    DEFAULT_SEAT_PROBE_LIMIT,
    FALLBACK_GRID_COLUMNS,
    FALLBACK_GRID_ROWS,
    QR_ATTENDANCE_PREFIX,
)
from .database.connection import DBConfig, DatabaseConnection
from .enrollments.mysql_enrollment_repository import MySQLEnrollmentRepository
from .enrollments.repository import EnrollmentRepository
from .schedules.matcher import ScheduleWindowMatcher
from .schedules.mysql_schedule_repository import MySQLScheduleRepository, MySQLSectionRepository
from .schedules.repository import ScheduleRepository, SectionRepository
from .schedules.service import EligibilityService
from .seats.fallback import FallbackReconstructor
from .seats.loader import SeatPlanLoader
from .seats.mysql_seat_repository import MySQLSeatRepository
from .seats.repository import SeatRepository
from .seats.service import SeatService


@dataclass(frozen=True)
class Container:
    sections_repo: SectionRepository
    schedules_repo: ScheduleRepository
    seats_repo: SeatRepository
    enrollments_repo: EnrollmentRepository
    attendance_repo: AttendanceRepository

    matcher: ScheduleWindowMatcher
    fallback_reconstructor: FallbackReconstructor
    seat_plan_loader: SeatPlanLoader

    eligibility_service: EligibilityService
    seat_service: SeatService
    checkin_service: CheckInService

    qr_prefix: str = QR_ATTENDANCE_PREFIX


def build_services(
    *,
    sections_repo: SectionRepository,
    schedules_repo: ScheduleRepository,
    seats_repo: SeatRepository,
    enrollments_repo: EnrollmentRepository,
    attendance_repo: AttendanceRepository,
    settings: Mapping[str, Any] | None = None,
    clock: Clock | None = None,
) -> Container:
    """Wire services over the given repositories.

    ``settings`` keys: CHECKIN_BUFFER_MINUTES, SEAT_PROBE_LIMIT,
    FALLBACK_GRID_ROWS, FALLBACK_GRID_COLUMNS, QR_PREFIX.
    """

    settings = settings or {}
    clock = clock or SystemClock()
    qr_prefix = str(settings.get("QR_PREFIX", QR_ATTENDANCE_PREFIX))

    matcher = ScheduleWindowMatcher(buffer_minutes=int(settings.get("CHECKIN_BUFFER_MINUTES", DEFAULT_BUFFER_MINUTES)))
    reconstructor = FallbackReconstructor(
        seats_repo,
        rows=int(settings.get("FALLBACK_GRID_ROWS", FALLBACK_GRID_ROWS)),
        columns=int(settings.get("FALLBACK_GRID_COLUMNS", FALLBACK_GRID_COLUMNS)),
        probe_limit=int(settings.get("SEAT_PROBE_LIMIT", DEFAULT_SEAT_PROBE_LIMIT)),
    )
    loader = SeatPlanLoader(seats_repo, enrollments_repo, reconstructor=reconstructor)

    eligibility_service = EligibilityService(sections_repo, schedules_repo, matcher=matcher, clock=clock)
    seat_service = SeatService(seats_repo, enrollments_repo, sections_repo, loader=loader)
    checkin_service = CheckInService(
        attendance_repo,
        enrollments_repo,
        eligibility_service,
        clock=clock,
        qr_prefix=qr_prefix,
    )

    return Container(
        sections_repo=sections_repo,
        schedules_repo=schedules_repo,
        seats_repo=seats_repo,
        enrollments_repo=enrollments_repo,
        attendance_repo=attendance_repo,
        matcher=matcher,
        fallback_reconstructor=reconstructor,
        seat_plan_loader=loader,
        eligibility_service=eligibility_service,
        seat_service=seat_service,
        checkin_service=checkin_service,
        qr_prefix=qr_prefix,
    )


def build_container(*, db_config: Mapping[str, Any], settings: Mapping[str, Any] | None = None) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return build_services(
        sections_repo=MySQLSectionRepository(conn),
        schedules_repo=MySQLScheduleRepository(conn),
        seats_repo=MySQLSeatRepository(conn),
        enrollments_repo=MySQLEnrollmentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings=settings,
    )
