# Project: weather-explorer
# Owner: GreenUnicorn
"""
test_validation.py — Unit tests for validation.py.

A fixed `today` is passed everywhere so results don't depend on the clock.
"""

from datetime import date

import pytest

from weather_explorer.errors import (
    DateTooRecent,
    InvalidDate,
    InvalidDateOrder,
    InvalidLatitude,
    InvalidLongitude,
    MissingDate,
    RangeTooLong,
    ValidationError,
)
from weather_explorer.validation import max_allowed_date, validate_request

TODAY = date(2024, 6, 1)


def _validate(lat="52.52", lon="13.41", start="2024-01-01", end="2024-01-05"):
    return validate_request(lat, lon, start, end, today=TODAY)


# ---------------------------------------------------------------------------
# Successful requests
# ---------------------------------------------------------------------------

def test_berlin_request_is_normalised():
    result = _validate()
    assert result == {
        "latitude": 52.52,
        "longitude": 13.41,
        "start_date": "2024-01-01",
        "end_date": "2024-01-05",
    }


def test_coordinates_are_floats():
    result = _validate(lat="10", lon="-20")
    assert isinstance(result["latitude"], float)
    assert isinstance(result["longitude"], float)


def test_surrounding_whitespace_is_ignored():
    result = _validate(lat=" 52.52 ", lon="13.41\n")
    assert result["latitude"] == 52.52


@pytest.mark.parametrize("lat,lon", [("-90", "-180"), ("90", "180"), ("0", "0")])
def test_coordinate_bounds_are_inclusive(lat, lon):
    result = _validate(lat=lat, lon=lon)
    assert result["latitude"] == float(lat)
    assert result["longitude"] == float(lon)


def test_same_start_and_end_date_is_allowed():
    result = _validate(start="2024-01-01", end="2024-01-01")
    assert result["start_date"] == result["end_date"] == "2024-01-01"


def test_exactly_31_days_is_allowed():
    result = _validate(start="2024-01-01", end="2024-02-01")
    assert result["end_date"] == "2024-02-01"


def test_yesterday_is_allowed():
    result = _validate(start="2024-05-25", end="2024-05-31")
    assert result["end_date"] == "2024-05-31"


# ---------------------------------------------------------------------------
# Coordinate failures
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("lat", ["100", "-90.01", "90.5", "abc", "", "nan", "inf"])
def test_bad_latitude_raises(lat):
    with pytest.raises(InvalidLatitude, match="Latitude must be between -90 and 90"):
        _validate(lat=lat)


@pytest.mark.parametrize("lon", ["180.1", "-181", "east", "", "-inf"])
def test_bad_longitude_raises(lon):
    with pytest.raises(InvalidLongitude, match="Longitude must be between -180 and 180"):
        _validate(lon=lon)


def test_latitude_checked_before_longitude():
    with pytest.raises(InvalidLatitude):
        _validate(lat="100", lon="500")


def test_coordinates_checked_before_dates():
    with pytest.raises(InvalidLongitude):
        _validate(lon="999", start="", end="")


# ---------------------------------------------------------------------------
# Date failures
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("start,end", [("", "2024-01-05"), ("2024-01-01", ""), ("", ""), ("  ", "2024-01-05")])
def test_missing_date_raises(start, end):
    with pytest.raises(MissingDate, match="select both start and end dates"):
        _validate(start=start, end=end)


def test_unparseable_date_raises():
    with pytest.raises(InvalidDate):
        _validate(start="01/02/2024")


def test_end_before_start_raises():
    with pytest.raises(InvalidDateOrder, match="End date must be after start date"):
        _validate(start="2024-01-05", end="2024-01-01")


def test_32_days_raises():
    with pytest.raises(RangeTooLong, match="31 days or less"):
        _validate(start="2024-01-01", end="2024-02-02")


def test_order_checked_before_range():
    # Backwards by more than 31 days is still an ordering problem
    with pytest.raises(InvalidDateOrder):
        _validate(start="2024-03-01", end="2024-01-01")


def test_today_is_too_recent():
    with pytest.raises(DateTooRecent, match="2024-05-31"):
        _validate(start="2024-05-30", end="2024-06-01")


def test_future_start_is_too_recent():
    with pytest.raises(DateTooRecent):
        _validate(start="2024-07-01", end="2024-07-02")


def test_all_failures_are_validation_errors():
    with pytest.raises(ValidationError):
        _validate(lat="north")


# ---------------------------------------------------------------------------
# max_allowed_date
# ---------------------------------------------------------------------------

def test_max_allowed_date_is_yesterday():
    assert max_allowed_date(date(2024, 3, 1)) == date(2024, 2, 29)


def test_max_allowed_date_defaults_to_today():
    from datetime import timedelta

    assert max_allowed_date() == date.today() - timedelta(days=1)
