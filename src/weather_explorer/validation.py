# Project: weather-explorer
# Owner: GreenUnicorn
"""
validation.py — Turn raw form input into a backend weather request.

Rules are checked in a fixed order and the first failure wins, so the user
always sees exactly one message. Nothing here touches the network; the only
impure input is today's date, which callers can pass explicitly.
"""

import math
from datetime import date, timedelta

from weather_explorer.errors import (
    DateTooRecent,
    InvalidDate,
    InvalidDateOrder,
    InvalidLatitude,
    InvalidLongitude,
    MissingDate,
    RangeTooLong,
)

MAX_RANGE_DAYS = 31
LATITUDE_BOUNDS = (-90.0, 90.0)
LONGITUDE_BOUNDS = (-180.0, 180.0)


def max_allowed_date(today: date | None = None) -> date:
    """Return the latest date the archive can serve (yesterday).

    Args:
        today: Reference date. Defaults to date.today().

    Returns:
        today minus one day.
    """
    today = today or date.today()
    return today - timedelta(days=1)


def _parse_coordinate(raw: str, bounds: tuple[float, float]) -> float | None:
    """Parse a decimal coordinate, returning None if unparseable or out of bounds."""
    try:
        value = float(str(raw).strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    low, high = bounds
    if value < low or value > high:
        return None
    return value


def _parse_date(raw: str) -> date:
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        raise InvalidDate(f"Invalid date: '{raw}'. Use the YYYY-MM-DD format.")


def validate_request(
    raw_lat: str,
    raw_lon: str,
    raw_start: str,
    raw_end: str,
    today: date | None = None,
) -> dict:
    """Validate and normalise the input panel fields.

    Args:
        raw_lat: Latitude as typed by the user.
        raw_lon: Longitude as typed by the user.
        raw_start: Start date, 'YYYY-MM-DD'.
        raw_end: End date, 'YYYY-MM-DD'.
        today: Reference date for the archive-lag bound. Defaults to today.

    Returns:
        Dict with keys latitude (float), longitude (float),
        start_date and end_date ('YYYY-MM-DD' strings).

    Raises:
        InvalidLatitude: Latitude unparseable or outside [-90, 90].
        InvalidLongitude: Longitude unparseable or outside [-180, 180].
        MissingDate: Either date is empty.
        InvalidDate: Either date is not an ISO calendar date.
        InvalidDateOrder: End date is before the start date.
        RangeTooLong: The range spans more than 31 days.
        DateTooRecent: Either date is later than yesterday.
    """
    latitude = _parse_coordinate(raw_lat, LATITUDE_BOUNDS)
    if latitude is None:
        raise InvalidLatitude()

    longitude = _parse_coordinate(raw_lon, LONGITUDE_BOUNDS)
    if longitude is None:
        raise InvalidLongitude()

    if not raw_start or not raw_start.strip() or not raw_end or not raw_end.strip():
        raise MissingDate()

    start = _parse_date(raw_start)
    end = _parse_date(raw_end)

    if end < start:
        raise InvalidDateOrder()

    if (end - start).days > MAX_RANGE_DAYS:
        raise RangeTooLong()

    latest = max_allowed_date(today)
    if start > latest or end > latest:
        raise DateTooRecent(
            f"Dates must be {latest.isoformat()} or earlier "
            "(archive data lags by at least a day)"
        )

    return {
        "latitude": latitude,
        "longitude": longitude,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
    }
