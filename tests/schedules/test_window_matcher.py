from __future__ import annotations

from datetime import datetime

import pytest

from classroom_attendance.core.exceptions import ValidationError
from classroom_attendance.schedules.matcher import EligibilityQuery, ScheduleWindowMatcher, is_within_window
from classroom_attendance.schedules.model import ScheduleEntry, TimeOfDay

MONDAY_CLASS = [{"dayOfWeek": 1, "timeStart": "07:30", "timeEnd": "10:30"}]


def q(day: int, hour: int, minute: int, buffer: int = 10) -> EligibilityQuery:
    return EligibilityQuery(day_of_week=day, time=TimeOfDay(hour, minute), buffer_minutes=buffer)


@pytest.mark.parametrize(
    "hour, minute, expected",
    [
        (7, 22, True),
        (7, 20, True),  # exactly the buffered start
        (7, 19, False),
        (9, 0, True),
        (10, 30, True),  # exactly the end
        (10, 31, False),
    ],
)
def test_monday_class_window(hour, minute, expected):
    assert is_within_window(MONDAY_CLASS, q(1, hour, minute)) is expected


def test_other_day_does_not_match():
    assert is_within_window(MONDAY_CLASS, q(2, 8, 0)) is False


def test_zero_buffer_starts_at_class_start():
    assert is_within_window(MONDAY_CLASS, q(1, 7, 29, buffer=0)) is False
    assert is_within_window(MONDAY_CLASS, q(1, 7, 30, buffer=0)) is True


def test_ampm_and_24h_entries_match_identically():
    h24 = [{"dayOfWeek": 4, "timeStart": "14:00", "timeEnd": "15:00"}]
    ampm = [{"day": "Thursday", "startTime": "2:00 PM", "endTime": "3:00 PM"}]
    now = q(4, 14, 5)

    assert is_within_window(h24, now) is True
    assert is_within_window(ampm, now) is True


def test_structured_entries_are_accepted():
    entries = [ScheduleEntry(day_of_week=5, start_time=TimeOfDay(13, 0), end_time=TimeOfDay(14, 30))]
    assert is_within_window(entries, q(5, 12, 50)) is True
    assert is_within_window(entries, q(5, 14, 31)) is False


def test_malformed_entries_are_skipped_not_raised():
    entries = [
        {"dayOfWeek": 1, "timeStart": "half past seven", "timeEnd": "10:30"},
        {"day": "someday", "startTime": "07:30", "endTime": "10:30"},
        None,
        "garbage",
        {"dayOfWeek": 1, "timeStart": "11:00", "timeEnd": "09:00"},
        {"dayOfWeek": "\u00b2", "timeStart": "07:30", "timeEnd": "10:30"},
        {"dayOfWeek": "9" * 5000, "timeStart": "07:30", "timeEnd": "10:30"},
        {"dayOfWeek": 1, "timeStart": {"hour": float("inf")}, "timeEnd": "10:30"},
        {"id": float("inf"), "dayOfWeek": 1, "timeStart": "07:30", "timeEnd": "10:30"},
        {"dayOfWeek": 1, "timeStart": "07:30", "timeEnd": "10:30"},
    ]
    assert is_within_window(entries, q(1, 8, 0)) is True
    assert is_within_window(entries[:-1], q(1, 8, 0)) is False


def test_legacy_string_scenario():
    legacy = "Mon 9:00PM-10:00PM, Wed 7:30AM-10:30AM"

    assert is_within_window(legacy, q(3, 7, 25)) is True
    assert is_within_window(legacy, q(3, 7, 19)) is False
    assert is_within_window(legacy, q(1, 20, 55)) is True
    assert is_within_window(legacy, q(2, 8, 0)) is False


def test_legacy_string_used_when_entries_do_not_match():
    entries = [{"dayOfWeek": 2, "timeStart": "08:00", "timeEnd": "09:00"}]
    legacy = "Wed 7:30 AM - 10:30 AM | Room 203 (LEC)"

    assert is_within_window(entries, q(3, 8, 0), legacy_schedule=legacy) is True
    assert is_within_window([], q(3, 8, 0), legacy_schedule=legacy) is True
    assert is_within_window(None, q(3, 8, 0), legacy_schedule="No Schedule") is False


def test_nothing_to_match_is_false():
    assert is_within_window([], q(1, 8, 0)) is False
    assert is_within_window("", q(1, 8, 0)) is False


def test_buffer_before_midnight_does_not_wrap():
    entries = [{"dayOfWeek": 6, "timeStart": "00:05", "timeEnd": "01:00"}]
    assert is_within_window(entries, q(6, 0, 0)) is True
    assert is_within_window(entries, q(6, 23, 59)) is False


def test_matcher_builds_queries_with_its_buffer():
    matcher = ScheduleWindowMatcher(buffer_minutes=15)
    query = matcher.query_for(datetime(2026, 2, 2, 7, 15))  # Monday

    assert query == EligibilityQuery(day_of_week=1, time=TimeOfDay(7, 15), buffer_minutes=15)
    assert matcher.is_within_window(MONDAY_CLASS, query) is True


def test_query_rejects_negative_buffer():
    with pytest.raises(ValidationError):
        EligibilityQuery(day_of_week=1, time=TimeOfDay(8, 0), buffer_minutes=-1)


def test_iso_times_with_offset_are_matched():
    entries = [{"dayOfWeek": 1, "timeStart": "07:30:00+07:00", "timeEnd": "10:30:00.000+07:00"}]
    assert is_within_window(entries, q(1, 7, 20)) is True
    assert is_within_window(entries, q(1, 10, 31)) is False


def test_day_name_used_when_day_number_is_unusable():
    entries = [{"dayOfWeek": 0, "day": "Monday", "timeStart": "07:30", "timeEnd": "10:30"}]
    assert is_within_window(entries, q(1, 8, 0)) is True
    assert is_within_window([{"dayOfWeek": 0, "timeStart": "07:30", "timeEnd": "10:30"}], q(1, 8, 0)) is False
