from __future__ import annotations

import pytest

from classroom_attendance.seats.grid import from_display_id, to_display_id
from classroom_attendance.seats.model import SeatCoordinate


def test_corner_labels():
    assert to_display_id(SeatCoordinate(row=0, column=0)) == "W1"
    assert to_display_id(SeatCoordinate(row=6, column=3)) == "A7"
    assert to_display_id(SeatCoordinate(row=2, column=1)) == "C3"
    assert to_display_id(SeatCoordinate(row=2, column=2)) == "C3"


def test_unknown_column_uses_fallback_zone():
    assert to_display_id(SeatCoordinate(row=0, column=4)) == "X1"
    assert from_display_id("X1") is None


@pytest.mark.parametrize("row", range(7))
@pytest.mark.parametrize("column", [0, 3])
def test_window_and_aisle_round_trip(row, column):
    coordinate = SeatCoordinate(row=row, column=column)
    assert from_display_id(to_display_id(coordinate)) == coordinate


def test_center_labels_resolve_by_first_digit_rule():
    assert from_display_id("C3") == SeatCoordinate(row=2, column=2)
    assert from_display_id("C02") == SeatCoordinate(row=1, column=1)
    assert from_display_id("C07") == SeatCoordinate(row=6, column=1)


def test_lowercase_zone_is_accepted():
    assert from_display_id("w4") == SeatCoordinate(row=3, column=0)


@pytest.mark.parametrize("bad", ["", "1", "Z9", "C99", "W0", "W8", "Wx", "A-1", "W 1", "W²"])
def test_malformed_labels_return_none(bad):
    assert from_display_id(bad) is None
