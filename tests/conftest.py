# Project: weather-explorer
# Owner: GreenUnicorn
"""Shared fixtures: sample payloads and a throwaway log file."""

from datetime import date, timedelta

import pytest

from weather_explorer import utils


@pytest.fixture(autouse=True)
def tmp_log_path(tmp_path, monkeypatch):
    """Send log_error output to a temp file instead of ./logs."""
    path = tmp_path / "explorer.log"
    monkeypatch.setattr(utils, "_log_path", path)
    return path


def make_daily(n: int = 3, start: date = date(2024, 1, 1)) -> dict:
    """Build a daily block with n days of distinct temperatures."""
    return {
        "time": [(start + timedelta(days=i)).isoformat() for i in range(n)],
        "temperature_2m_max": [10.0 + i for i in range(n)],
        "temperature_2m_min": [1.0 + i for i in range(n)],
        "apparent_temperature_max": [8.0 + i for i in range(n)],
        "apparent_temperature_min": [-1.0 + i for i in range(n)],
    }


def make_payload(n: int = 3) -> dict:
    """Build a /weather-file-content response with n days."""
    return {
        "latitude": 52.52,
        "longitude": 13.41,
        "daily": make_daily(n),
        "daily_units": {
            "time": "iso8601",
            "temperature_2m_max": "°C",
            "temperature_2m_min": "°C",
            "apparent_temperature_max": "°C",
            "apparent_temperature_min": "°C",
        },
    }


@pytest.fixture()
def payload():
    return make_payload(n=15)
