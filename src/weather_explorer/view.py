# Project: weather-explorer
# Owner: GreenUnicorn
"""
view.py — Load lifecycle of the weather file shown in the dashboard.

    IDLE ──select──▶ LOADING ──resolve──▶ LOADED
                        │                    │
                        └───fail──▶ FAILED ◀─┘ (malformed data)

Selecting a file from any state starts a new LOADING cycle with a fresh
token. A response is applied only if it carries the current token, so a
slow response for a previously selected file can never overwrite the
newer selection. clear() returns to IDLE and invalidates every token.
"""

from collections.abc import Callable

from weather_explorer.api import CONTENT_FAILED
from weather_explorer.errors import MalformedSeries, TransportError
from weather_explorer.pagination import PAGE_SIZE_OPTIONS, Pager
from weather_explorer.transform import parse_weather_data, to_chart_series, to_table_rows

IDLE = "idle"
LOADING = "loading"
LOADED = "loaded"
FAILED = "failed"


class WeatherView:
    """Selected file, its parsed content, and table paging."""

    def __init__(self, page_size: int = PAGE_SIZE_OPTIONS[0]):
        self.status = IDLE
        self.filename: str | None = None
        self.data: dict | None = None
        self.error: str | None = None
        self.pager = Pager(page_size)
        self._token = 0

    @property
    def token(self) -> int:
        return self._token

    def select(self, filename: str) -> int:
        """Start loading filename, superseding any load in flight.

        Returns:
            The token the caller must pass back to resolve() or fail().
        """
        self._token += 1
        self.status = LOADING
        self.filename = filename
        self.data = None
        self.error = None
        self.pager.reset()
        return self._token

    def resolve(self, token: int, payload) -> bool:
        """Apply a fetched payload if token is current.

        A payload that does not parse moves the view to FAILED.

        Returns:
            True if the payload was applied (LOADED or FAILED), False if stale.
        """
        if token != self._token or self.status != LOADING:
            return False
        try:
            self.data = parse_weather_data(payload)
        except MalformedSeries as e:
            return self.fail(token, f"Malformed weather data: {e}")
        self.status = LOADED
        self.error = None
        self.pager.reset()
        return True

    def fail(self, token: int, message: str) -> bool:
        if token != self._token or self.status != LOADING:
            return False
        self.status = FAILED
        self.data = None
        self.error = message
        return True

    def clear(self) -> None:
        self._token += 1
        self.status = IDLE
        self.filename = None
        self.data = None
        self.error = None
        self.pager.reset()

    def load(self, fetch: Callable[[str], dict]) -> bool:
        """Fetch the currently selected file and resolve or fail its token.

        Args:
            fetch: Callable taking a file name and returning its raw payload.

        Returns:
            True if the result was applied to this view.
        """
        if self.status != LOADING or self.filename is None:
            return False
        token = self._token
        try:
            payload = fetch(self.filename)
        except TransportError as e:
            return self.fail(token, e.detail or CONTENT_FAILED)
        return self.resolve(token, payload)

    def chart_points(self) -> list[dict]:
        if self.data is None:
            return []
        return to_chart_series(self.data["daily"])

    def table_rows(self) -> list[dict]:
        if self.data is None:
            return []
        return to_table_rows(self.data["daily"])

    def page_rows(self) -> list[dict]:
        return self.pager.current(self.table_rows())
