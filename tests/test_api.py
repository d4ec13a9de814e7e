# Project: weather-explorer
# Owner: GreenUnicorn
"""
test_api.py — Unit tests for api.py.

requests.request is patched in every test — no real network calls.
"""

from unittest.mock import MagicMock

import pytest
import requests

from conftest import make_payload
from weather_explorer import api
from weather_explorer.errors import TransportError

BASE = "https://weather.example.com"

REQUEST = {
    "latitude": 52.52,
    "longitude": 13.41,
    "start_date": "2024-01-01",
    "end_date": "2024-01-05",
}


def _response(body=None, status: int = 200, json_error: bool = False) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    if json_error:
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture()
def fake_request(monkeypatch):
    mock = MagicMock()
    monkeypatch.setattr("weather_explorer.api.requests.request", mock)
    return mock


# ---------------------------------------------------------------------------
# store_weather_data
# ---------------------------------------------------------------------------

def test_store_posts_request_body(fake_request):
    fake_request.return_value = _response({"message": "ok", "file": "berlin.json"})

    result = api.store_weather_data(REQUEST, base_url=BASE, timeout=5)

    assert result == {"message": "ok", "file": "berlin.json"}
    fake_request.assert_called_once_with(
        "POST", f"{BASE}/store-weather-data", timeout=5, json=REQUEST
    )


def test_store_surfaces_backend_detail(fake_request):
    fake_request.return_value = _response({"detail": "Open-Meteo rejected the range"}, status=400)

    with pytest.raises(TransportError) as exc_info:
        api.store_weather_data(REQUEST, base_url=BASE)

    assert exc_info.value.detail == "Open-Meteo rejected the range"
    assert exc_info.value.status_code == 400


def test_store_generic_message_without_detail(fake_request):
    fake_request.return_value = _response({"error": "x"}, status=500)
    with pytest.raises(TransportError, match="Failed to fetch weather data"):
        api.store_weather_data(REQUEST, base_url=BASE)


def test_store_non_string_detail_uses_generic_message(fake_request):
    fake_request.return_value = _response({"detail": [{"loc": ["body"], "msg": "bad"}]}, status=422)
    with pytest.raises(TransportError, match="Failed to fetch weather data"):
        api.store_weather_data(REQUEST, base_url=BASE)


def test_store_error_body_not_json(fake_request):
    fake_request.return_value = _response(status=502, json_error=True)
    with pytest.raises(TransportError, match="Failed to fetch weather data"):
        api.store_weather_data(REQUEST, base_url=BASE)


def test_connection_error_becomes_transport_error(fake_request):
    fake_request.side_effect = requests.ConnectionError("refused")
    with pytest.raises(TransportError) as exc_info:
        api.store_weather_data(REQUEST, base_url=BASE)
    assert exc_info.value.status_code is None


def test_timeout_becomes_transport_error(fake_request):
    fake_request.side_effect = requests.Timeout("slow")
    with pytest.raises(TransportError, match="Failed to load files"):
        api.list_weather_files(base_url=BASE)


def test_failures_are_logged(fake_request, tmp_log_path):
    fake_request.return_value = _response({"detail": "nope"}, status=404)
    with pytest.raises(TransportError):
        api.get_weather_file_content("x.json", base_url=BASE)
    assert "[ERROR]" in tmp_log_path.read_text()
    assert "HTTP 404" in tmp_log_path.read_text()


# ---------------------------------------------------------------------------
# list_weather_files
# ---------------------------------------------------------------------------

def test_list_returns_files(fake_request):
    files = [{"name": "a", "created_at": "2024-01-02T00:00:00Z", "size_bytes": 10}]
    fake_request.return_value = _response({"files": files})

    assert api.list_weather_files(base_url=BASE, timeout=3) == files
    fake_request.assert_called_once_with("GET", f"{BASE}/list-weather-files", timeout=3)


@pytest.mark.parametrize("body", [{}, {"files": None}, [], {"files": "a,b"}])
def test_list_rejects_unexpected_body(fake_request, body):
    fake_request.return_value = _response(body)
    with pytest.raises(TransportError, match="Failed to load files"):
        api.list_weather_files(base_url=BASE)


def test_list_success_body_not_json(fake_request):
    fake_request.return_value = _response(json_error=True)
    with pytest.raises(TransportError):
        api.list_weather_files(base_url=BASE)


# ---------------------------------------------------------------------------
# get_weather_file_content
# ---------------------------------------------------------------------------

def test_content_returns_raw_payload(fake_request):
    payload = make_payload(3)
    fake_request.return_value = _response(payload)
    assert api.get_weather_file_content("berlin.json", base_url=BASE) == payload


def test_content_quotes_filename(fake_request):
    fake_request.return_value = _response(make_payload(1))
    api.get_weather_file_content("my file/1.json", base_url=BASE)
    url = fake_request.call_args.args[1]
    assert url == f"{BASE}/weather-file-content/my%20file%2F1.json"


def test_content_default_message(fake_request):
    fake_request.return_value = _response({}, status=500)
    with pytest.raises(TransportError, match="Failed to load file content"):
        api.get_weather_file_content("x.json", base_url=BASE)
