# Project: weather-explorer
# Owner: GreenUnicorn
"""
utils.py — Shared utilities: display formatting and failure logging.
"""

from datetime import datetime
from pathlib import Path

DEFAULT_LOG_PATH = Path("logs/weather_explorer.log")
LOG_PREFIX = "[explorer]"


def fmt_day(date_str: str) -> str:
    """Format a date string as a short human-readable label.

    Args:
        date_str: Date in 'YYYY-MM-DD' format.

    Returns:
        Formatted string like 'Mon 24 Feb'.
    """
    dt = datetime.strptime(date_str, "%Y-%m-%d")
    return dt.strftime("%a %d %b")


def fmt_size(size_bytes: int) -> str:
    """Format a byte count in kilobytes with one decimal, e.g. '2.0 KB'."""
    return f"{size_bytes / 1024:.1f} KB"


def fmt_timestamp(timestamp: str) -> str:
    """Format an ISO 8601 timestamp as 'YYYY-MM-DD HH:MM'.

    A trailing 'Z' is accepted. Strings that do not parse are returned
    unchanged so a bad value from the backend is still shown.
    """
    if not timestamp:
        return ""
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return dt.strftime("%Y-%m-%d %H:%M")


def log_info(message: str) -> None:
    """Print a prefixed status line to the console."""
    print(f"{LOG_PREFIX} {message}")


_log_path = DEFAULT_LOG_PATH


def set_log_path(path: Path | str) -> None:
    """Change the file log_error appends to (from the [log] config section)."""
    global _log_path
    _log_path = Path(path)


def log_error(message: str, log_path: Path | None = None) -> None:
    """Print an error and append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path. Defaults to the configured path.
    """
    log_path = log_path or _log_path
    print(f"{LOG_PREFIX} {message}")
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] {message}\n")
    except OSError:
        pass  # Never crash on logging failure
