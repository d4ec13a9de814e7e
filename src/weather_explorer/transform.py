# Project: weather-explorer
# Owner: GreenUnicorn
"""
transform.py — Parse stored weather files and reshape them for display.

A stored file holds parallel daily arrays (one date list plus four
temperature lists). The chart wants one point per day with max/min, the
table wants one row per day with all four temperatures. Missing values
(None) are passed through untouched: a gap in the chart, an empty cell in
the table, never a zero.
"""

from collections.abc import Mapping, Sequence

from weather_explorer.errors import MalformedSeries

TEMPERATURE_SERIES = [
    "temperature_2m_max",
    "temperature_2m_min",
    "apparent_temperature_max",
    "apparent_temperature_min",
]
DAILY_SERIES = ["time", *TEMPERATURE_SERIES]

DEFAULT_TEMPERATURE_UNIT = "°C"


def _check_daily(daily) -> int:
    """Check the daily block shape and return the common series length N.

    Raises:
        MalformedSeries: If a series is missing, not a list, or lengths differ.
    """
    if not isinstance(daily, Mapping):
        raise MalformedSeries("Weather data has no 'daily' section")

    lengths = {}
    for key in DAILY_SERIES:
        series = daily.get(key)
        if series is None:
            raise MalformedSeries(f"Weather data is missing the '{key}' series")
        if isinstance(series, (str, bytes)) or not isinstance(series, Sequence):
            raise MalformedSeries(f"Series '{key}' is not a list")
        lengths[key] = len(series)

    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{k}={n}" for k, n in lengths.items())
        raise MalformedSeries(f"Daily series have different lengths ({detail})")

    return lengths["time"]


def parse_weather_data(payload) -> dict:
    """Validate a /weather-file-content payload.

    Args:
        payload: Decoded JSON body.

    Returns:
        Dict with keys latitude, longitude (may be None), daily (the five
        series as lists) and daily_units (a label for every series).

    Raises:
        MalformedSeries: If the payload does not match the daily contract.
    """
    if not isinstance(payload, Mapping):
        raise MalformedSeries("Weather data is not a JSON object")

    daily = payload.get("daily")
    _check_daily(daily)

    units = payload.get("daily_units")
    if not isinstance(units, Mapping):
        units = {}

    daily_units = {"time": str(units.get("time") or "")}
    for key in TEMPERATURE_SERIES:
        daily_units[key] = str(units.get(key) or DEFAULT_TEMPERATURE_UNIT)

    return {
        "latitude": payload.get("latitude"),
        "longitude": payload.get("longitude"),
        "daily": {key: list(daily[key]) for key in DAILY_SERIES},
        "daily_units": daily_units,
    }


def to_chart_series(daily: Mapping) -> list[dict]:
    """One chart point per day: {date, maxTemp, minTemp}.

    Raises:
        MalformedSeries: If the daily series are missing or unequal in length.
    """
    n = _check_daily(daily)
    return [
        {
            "date": daily["time"][i],
            "maxTemp": daily["temperature_2m_max"][i],
            "minTemp": daily["temperature_2m_min"][i],
        }
        for i in range(n)
    ]


def to_table_rows(daily: Mapping) -> list[dict]:
    """One table row per day: {date, maxTemp, minTemp, appMax, appMin}.

    Raises:
        MalformedSeries: If the daily series are missing or unequal in length.
    """
    n = _check_daily(daily)
    return [
        {
            "date": daily["time"][i],
            "maxTemp": daily["temperature_2m_max"][i],
            "minTemp": daily["temperature_2m_min"][i],
            "appMax": daily["apparent_temperature_max"][i],
            "appMin": daily["apparent_temperature_min"][i],
        }
        for i in range(n)
    ]
