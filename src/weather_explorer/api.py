# Project: weather-explorer
# Owner: GreenUnicorn
"""
api.py — Client for the weather storage backend.

The backend fetches archive data from Open-Meteo, stores it as a named JSON
file, and serves the stored files back. Three endpoints are used:

    POST /store-weather-data
    GET  /list-weather-files
    GET  /weather-file-content/{filename}

Each call is a single attempt with a timeout. Any failure (connection
error, timeout, non-2xx, undecodable body) is raised as TransportError
carrying a message that can be shown to the user directly.
"""

from urllib.parse import quote

import requests

from weather_explorer.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS
from weather_explorer.errors import TransportError
from weather_explorer.utils import log_error

STORE_FAILED = "Failed to fetch weather data"
LIST_FAILED = "Failed to load files"
CONTENT_FAILED = "Failed to load file content"


def _error_detail(response: requests.Response, fallback: str) -> str:
    """Return the backend's 'detail' text if it sent one, else fallback."""
    try:
        body = response.json()
    except ValueError:
        return fallback
    if isinstance(body, dict) and isinstance(body.get("detail"), str) and body["detail"]:
        return body["detail"]
    return fallback


def _request(method: str, url: str, fallback: str, timeout: float, **kwargs):
    """Send one request and return the decoded JSON body.

    Raises:
        TransportError: On any network, HTTP status or decoding failure.
    """
    try:
        response = requests.request(method, url, timeout=timeout, **kwargs)
    except requests.RequestException as e:
        log_error(f"{method} {url} failed: {e}")
        raise TransportError(fallback) from e

    if not response.ok:
        detail = _error_detail(response, fallback)
        log_error(f"{method} {url} returned HTTP {response.status_code}: {detail}")
        raise TransportError(detail, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as e:
        log_error(f"{method} {url} returned a body that is not JSON")
        raise TransportError(fallback, status_code=response.status_code) from e


def store_weather_data(
    request: dict,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict:
    """Ask the backend to fetch and store weather data for a validated request.

    Args:
        request: Dict from validate_request (latitude, longitude,
            start_date, end_date).
        base_url: Backend base URL without trailing slash.
        timeout: Seconds to wait for the backend.

    Returns:
        Dict with keys message (str) and file (str, the stored file name).

    Raises:
        TransportError: If the backend call fails.
    """
    body = _request(
        "POST",
        f"{base_url}/store-weather-data",
        STORE_FAILED,
        timeout,
        json=request,
    )
    if not isinstance(body, dict):
        raise TransportError(STORE_FAILED)
    return {"message": str(body.get("message", "")), "file": str(body.get("file", ""))}


def list_weather_files(
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict]:
    """Return the stored file descriptors in the order the backend sent them.

    Each descriptor is a dict with name, created_at and size_bytes.

    Raises:
        TransportError: If the call fails or the body has no 'files' list.
    """
    body = _request("GET", f"{base_url}/list-weather-files", LIST_FAILED, timeout)
    files = body.get("files") if isinstance(body, dict) else None
    if not isinstance(files, list):
        log_error(f"Unexpected list-weather-files response: {body!r}")
        raise TransportError(LIST_FAILED)
    return files


def get_weather_file_content(
    filename: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict:
    """Fetch the raw JSON content of one stored weather file.

    The body is returned undecoded; see transform.parse_weather_data.

    Raises:
        TransportError: If the backend call fails.
    """
    url = f"{base_url}/weather-file-content/{quote(filename, safe='')}"
    return _request("GET", url, CONTENT_FAILED, timeout)
