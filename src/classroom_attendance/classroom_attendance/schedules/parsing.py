"""Parsers for the schedule representations found in section data.

Upstream data mixes 24-hour strings (``"07:30"``, ``"07:30:00"``), 12-hour
strings (``"7:30 AM"``), ISO local-time literals and, for legacy sections, a
single free-text line such as ``"Mon 7:30AM-10:30AM | Room 203 (LEC)"``.
Every parser here raises :class:`ParseFailure` and never anything else for
bad input, so callers can skip a single entry cleanly.
"""

from __future__ import annotations

import re
from datetime import time, timedelta
from typing import Any, Iterable, List, Mapping, Sequence, Tuple

from ..core.exceptions import ParseFailure
from .model import ScheduleEntry, TimeOfDay

DAY_ABBREVIATIONS: Tuple[str, ...] = ("MON", "TUE", "WED", "THU", "FRI", "SAT", "SUN")
DAY_FULL_NAMES: Tuple[str, ...] = (
    "MONDAY",
    "TUESDAY",
    "WEDNESDAY",
    "THURSDAY",
    "FRIDAY",
    "SATURDAY",
    "SUNDAY",
)

_H24_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2})(?:\.\d+)?)?$")
_AMPM_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*([AP]M)$", re.IGNORECASE)
_AMPM_RANGE_RE = re.compile(r"(\d{1,2}:\d{2}\s*[AP]M)\s*-\s*(\d{1,2}:\d{2}\s*[AP]M)", re.IGNORECASE)

_DAY_KEYS = ("dayOfWeek", "day_of_week")
_DAY_NAME_KEYS = ("day", "dayName", "day_name")
_START_KEYS = ("timeStart", "startTime", "start_time", "time_start")
_END_KEYS = ("timeEnd", "endTime", "end_time", "time_end")
_KIND_KEYS = ("scheduleType", "kind", "type", "schedule_type")


def resolve_day_of_week(value: Any) -> int:
    """Resolve an ISO day number from an int or a day name/abbreviation.

    Names are matched case-insensitively by substring against MON..SUN, so
    ``"Monday"``, ``"mon"`` and ``"MON/WED"`` all resolve; the first
    abbreviation found in MON..SUN order wins.
    """

    if isinstance(value, bool):
        raise ParseFailure(f"Invalid day of week: {value!r}")
    if isinstance(value, int):
        if 1 <= value <= 7:
            return value
        raise ParseFailure(f"Day of week out of range: {value}")
    if not isinstance(value, str):
        raise ParseFailure(f"Invalid day of week: {value!r}")

    text = value.strip().upper()
    if text.isascii() and text.isdigit():
        if len(text) > 2:
            raise ParseFailure(f"Day of week out of range: {value!r}")
        return resolve_day_of_week(int(text))
    for number, abbreviation in enumerate(DAY_ABBREVIATIONS, start=1):
        if abbreviation in text:
            return number
    raise ParseFailure(f"Unknown day of week: {value!r}")


def day_names(day_of_week: int) -> Tuple[str, str]:
    """Full name and three-letter abbreviation for an ISO day number."""

    if not 1 <= day_of_week <= 7:
        raise ParseFailure(f"Day of week out of range: {day_of_week}")
    return DAY_FULL_NAMES[day_of_week - 1], DAY_ABBREVIATIONS[day_of_week - 1]


def parse_time_24h(text: str) -> TimeOfDay:
    match = _H24_RE.match(text.strip())
    if not match:
        raise ParseFailure(f"Not a 24-hour time: {text!r}")
    hour, minute = int(match.group(1)), int(match.group(2))
    if match.group(3) is not None and int(match.group(3)) > 59:
        raise ParseFailure(f"Invalid seconds in time: {text!r}")
    return TimeOfDay(hour, minute)


def parse_time_ampm(text: str) -> TimeOfDay:
    match = _AMPM_RE.match(text.strip())
    if not match:
        raise ParseFailure(f"Not a 12-hour time: {text!r}")

    hour, minute = int(match.group(1)), int(match.group(2))
    suffix = match.group(3).upper()
    if hour > 12:
        raise ParseFailure(f"Hour out of range for 12-hour time: {text!r}")

    if suffix == "PM" and hour < 12:
        hour += 12
    elif suffix == "AM" and hour == 12:
        hour = 0
    return TimeOfDay(hour, minute)


def parse_time_iso(text: str) -> TimeOfDay:
    try:
        parsed = time.fromisoformat(text.strip())
    except ValueError:
        raise ParseFailure(f"Not an ISO local time: {text!r}") from None
    return TimeOfDay.from_time(parsed)


_STRING_PARSERS = (parse_time_24h, parse_time_ampm, parse_time_iso)


def parse_time_of_day(value: Any) -> TimeOfDay:
    """Parse a time value, trying 24-hour, then AM/PM, then ISO.

    Already-structured values (``TimeOfDay``, ``datetime.time``, MySQL
    ``timedelta`` and ``{"hour": .., "minute": ..}`` mappings) are accepted
    as-is.
    """

    if isinstance(value, TimeOfDay):
        return value
    if isinstance(value, time):
        return TimeOfDay.from_time(value)
    if isinstance(value, timedelta):
        total = int(value.total_seconds()) % 86400
        return TimeOfDay(total // 3600, (total % 3600) // 60)
    if isinstance(value, Mapping):
        try:
            return TimeOfDay(int(value["hour"]), int(value.get("minute", 0)))
        except (KeyError, TypeError, ValueError, OverflowError):
            raise ParseFailure(f"Invalid time mapping: {value!r}") from None
    if not isinstance(value, str) or not value.strip():
        raise ParseFailure(f"Invalid time value: {value!r}")

    for parser in _STRING_PARSERS:
        try:
            return parser(value)
        except ParseFailure:
            continue
    raise ParseFailure(f"Unable to parse time: {value!r}")


def _first_present(record: Mapping[str, Any], keys: Iterable[str]) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None and value != "":
            return value
    return None


def _record_day(record: Mapping[str, Any]) -> int:
    # An unusable day number falls back to the day name when one is present.
    number = _first_present(record, _DAY_KEYS)
    name = _first_present(record, _DAY_NAME_KEYS)
    if number is None and name is None:
        raise ParseFailure("Schedule record has no day")
    if number is not None:
        try:
            return resolve_day_of_week(number)
        except ParseFailure:
            if name is None:
                raise
    return resolve_day_of_week(name)


def schedule_entry_from_record(record: Any) -> ScheduleEntry:
    """Normalize an upstream schedule record into a :class:`ScheduleEntry`.

    Accepts the backend shape (``dayOfWeek``/``timeStart``/``timeEnd``/
    ``scheduleType``) and the display shape (``day``/``startTime``/
    ``endTime``/``type``), plus snake_case variants.
    """

    if isinstance(record, ScheduleEntry):
        return record
    if not isinstance(record, Mapping):
        raise ParseFailure(f"Unsupported schedule record: {type(record).__name__}")

    day_of_week = _record_day(record)

    start_value = _first_present(record, _START_KEYS)
    end_value = _first_present(record, _END_KEYS)
    if start_value is None or end_value is None:
        raise ParseFailure("Schedule record has no start/end time")

    schedule_id = record.get("id", record.get("schedule_id"))
    section_id = record.get("sectionId", record.get("section_id"))
    try:
        schedule_id = int(schedule_id) if schedule_id is not None else None
        section_id = int(section_id) if section_id is not None else None
    except (TypeError, ValueError, OverflowError):
        raise ParseFailure(f"Invalid schedule identifiers: {schedule_id!r}/{section_id!r}") from None

    return ScheduleEntry(
        day_of_week=day_of_week,
        start_time=parse_time_of_day(start_value),
        end_time=parse_time_of_day(end_value),
        room=str(record.get("room") or ""),
        kind=str(_first_present(record, _KIND_KEYS) or ""),
        schedule_id=schedule_id,
        section_id=section_id,
    )


def segments_for_day(schedule: str, day_of_week: int) -> List[str]:
    """Comma-separated segments of a legacy schedule that mention the day."""

    names = day_names(day_of_week)
    segments = []
    for segment in schedule.split(","):
        upper = segment.upper()
        if any(name in upper for name in names):
            segments.append(segment.strip())
    return segments


def find_time_range(segment: str) -> Tuple[str, str] | None:
    """First ``H:MM AM - H:MM PM`` style range in a legacy segment."""

    match = _AMPM_RANGE_RE.search(segment)
    if not match:
        return None
    return match.group(1), match.group(2)


def format_ampm(value: TimeOfDay) -> str:
    """Render a time as ``h:MMAM``/``h:MMPM`` (e.g. ``7:30AM``)."""

    suffix = "AM" if value.hour < 12 else "PM"
    hour = value.hour % 12 or 12
    return f"{hour}:{value.minute:02d}{suffix}"


def format_schedule_string(entries: Sequence[ScheduleEntry]) -> str:
    """Render entries as the legacy display line.

    ``"Mon 7:30AM-10:30AM | Room 203 (LEC), Wed ..."``
    """

    parts = []
    for entry in entries:
        day = DAY_ABBREVIATIONS[entry.day_of_week - 1].title() if 1 <= entry.day_of_week <= 7 else "Unknown"
        part = f"{day} {format_ampm(entry.start_time)}-{format_ampm(entry.end_time)}"
        if entry.room:
            part += f" | {entry.room}"
        if entry.kind:
            part += f" ({entry.kind})"
        parts.append(part)
    return ", ".join(parts)
