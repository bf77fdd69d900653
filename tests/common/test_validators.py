import math

import pytest

from workspace_attendance.common.datetime_utils import day_bounds, iter_dates, parse_iso_date
from workspace_attendance.common.validators import normalize_text, require_length_between, validate_coordinates
from workspace_attendance.core.exceptions import InvalidCoordinates, NotesLengthInvalid


def test_normalize_text_collapses_spaces_but_keeps_lines():
    raw = "  Fixed\u200b   login  \r\n\r\n\r\n\tand   tests "

    assert normalize_text(raw) == "Fixed login\n\nand tests"


def test_normalize_text_applies_nfc():
    assert normalize_text("Cafe\u0301") == "Caf\u00e9"


def test_normalize_text_handles_none():
    assert normalize_text(None) == ""


def test_length_bounds_are_inclusive():
    assert require_length_between("x" * 10, "Notes", 10, 1000) == "x" * 10

    with pytest.raises(NotesLengthInvalid):
        require_length_between("x" * 9, "Notes", 10, 1000)


@pytest.mark.parametrize(
    "lat,lon",
    [(90.1, 0), (-90.1, 0), (0, 180.5), (0, -181), (None, 0), ("north", 0), (math.nan, 0)],
)
def test_invalid_coordinates(lat, lon):
    with pytest.raises(InvalidCoordinates):
        validate_coordinates(lat, lon)


def test_boundary_coordinates_are_valid():
    validate_coordinates(90, -180)
    validate_coordinates("10.5", "106.7")


def test_parse_iso_date_ignores_time_part():
    assert parse_iso_date("2025-01-06T10:00:00.000Z").isoformat() == "2025-01-06"


def test_iter_dates_and_day_bounds():
    days = list(iter_dates(parse_iso_date("2025-01-30"), parse_iso_date("2025-02-02")))
    start, end = day_bounds(days[0])

    assert len(days) == 4
    assert start.hour == 0 and end.hour == 23 and end.second == 59
