# Project: weather-explorer
# Owner: GreenUnicorn
"""
catalog.py — The list of stored weather files shown in the sidebar.

Refreshes can overlap (a store finishes while the user is also clicking
refresh), so every refresh gets a token and only the most recently started
one may write the list. Failures never propagate: the list is emptied and
a display message is kept in `error`.
"""

from collections.abc import Callable

from weather_explorer.api import LIST_FAILED
from weather_explorer.errors import TransportError
from weather_explorer.utils import log_error

NO_FILES_MESSAGE = "No files found"


def sort_files(files: list[dict]) -> list[dict]:
    """Sort file descriptors newest first by their ISO created_at string.

    Entries without created_at sort last. The sort is stable, so entries
    with equal timestamps keep their incoming order.
    """
    return sorted(files, key=lambda f: f.get("created_at") or "", reverse=True)


def is_descriptor(entry) -> bool:
    """True if entry looks like a stored-file descriptor.

    name must be a string, created_at a string (or absent), and size_bytes
    a non-negative integer.
    """
    if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
        return False
    created_at = entry.get("created_at")
    if created_at is not None and not isinstance(created_at, str):
        return False
    size = entry.get("size_bytes")
    return isinstance(size, int) and not isinstance(size, bool) and size >= 0


class FileCatalog:
    """Sorted stored-file list plus the current selection.

    Args:
        fetch: Zero-argument callable returning the raw file list
            (normally a partial of api.list_weather_files).
        on_select: Called with the file name whenever a file is selected.
    """

    def __init__(
        self,
        fetch: Callable[[], list[dict]],
        on_select: Callable[[str], None] | None = None,
    ):
        self.fetch = fetch
        self.on_select = on_select
        self.files: list[dict] = []
        self.selected: str | None = None
        self.loading = False
        self.error: str | None = None
        self._latest_token = 0

    def begin_refresh(self) -> int:
        self._latest_token += 1
        self.loading = True
        return self._latest_token

    def is_current(self, token: int) -> bool:
        return token == self._latest_token

    def complete_refresh(self, token: int, files) -> bool:
        """Store a refresh result if token is still the latest.

        Returns:
            True if the result was applied, False if it was stale.
        """
        if not self.is_current(token):
            return False
        if not isinstance(files, list) or not all(is_descriptor(f) for f in files):
            log_error(f"Expected a list of file descriptors, got: {files!r}")
            return self.fail_refresh(token, LIST_FAILED)
        self.files = sort_files(files)
        self.error = None
        self.loading = False
        return True

    def fail_refresh(self, token: int, message: str) -> bool:
        """Empty the list and keep message for display, if token is current."""
        if not self.is_current(token):
            return False
        self.files = []
        self.error = message
        self.loading = False
        return True

    def refresh(self) -> list[dict]:
        """Fetch the file list and apply it. Never raises for backend failures.

        Returns:
            The displayed (sorted) file list after the refresh.
        """
        token = self.begin_refresh()
        try:
            files = self.fetch()
        except TransportError as e:
            self.fail_refresh(token, e.detail)
        else:
            self.complete_refresh(token, files)
        return self.files

    def select(self, name: str) -> None:
        self.selected = name
        if self.on_select is not None:
            self.on_select(name)

    def empty_message(self) -> str | None:
        """Text for the empty/error state, or None while there is a list to show."""
        if self.files or self.loading:
            return None
        return self.error or NO_FILES_MESSAGE
