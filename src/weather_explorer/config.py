# Project: weather-explorer
# Owner: GreenUnicorn
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config path defaults to "config.toml" in the current working directory,
but can be overridden for testing. Only [backend].base_url is required;
everything else is filled in from DEFAULT_CONFIG.
"""

import copy
import tomllib
from pathlib import Path

from weather_explorer.pagination import PAGE_SIZE_OPTIONS

DEFAULT_CONFIG_PATH = Path("config.toml")
DEFAULT_BASE_URL = "https://insrisk-weather-service-635514326604.asia-south1.run.app"
DEFAULT_TIMEOUT_SECONDS = 30

DEFAULT_CONFIG: dict = {
    "backend": {
        "base_url": DEFAULT_BASE_URL,
        "timeout_seconds": DEFAULT_TIMEOUT_SECONDS,
    },
    "display": {
        "default_page_size": PAGE_SIZE_OPTIONS[0],
    },
    "log": {
        "path": "logs/weather_explorer.log",
    },
}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values, with defaults applied.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys are missing or values are out of range.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and set your backend URL."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    return _with_defaults(config)


def _with_defaults(config: dict) -> dict:
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in config.items():
        if isinstance(values, dict):
            merged.setdefault(section, {}).update(values)
        else:
            merged[section] = values
    merged["backend"]["base_url"] = merged["backend"]["base_url"].rstrip("/")
    return merged


def _validate(config: dict) -> None:
    """Validate the config sections and keys that are present.

    Expected config schema::

        [backend]
        base_url        = <str>   # required, e.g. "https://weather.example.com"
        timeout_seconds = <num>   # optional, > 0

        [display]
        default_page_size = <int> # optional, one of 10, 20, 50

        [log]
        path = <str>              # optional, log file for failures

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If a required section/key is absent or a value is invalid.
    """
    if "backend" not in config:
        raise ValueError("Missing required config section: [backend]")

    backend = config["backend"]
    base_url = backend.get("base_url")
    if not base_url:
        raise ValueError("Missing required config key: [backend].base_url")
    if not str(base_url).startswith(("http://", "https://")):
        raise ValueError(f"[backend].base_url must be an http(s) URL, got {base_url!r}")

    timeout = backend.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    if not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("[backend].timeout_seconds must be a positive number")

    page_size = config.get("display", {}).get("default_page_size", PAGE_SIZE_OPTIONS[0])
    if (
        not isinstance(page_size, int)
        or isinstance(page_size, bool)
        or page_size not in PAGE_SIZE_OPTIONS
    ):
        raise ValueError(
            f"[display].default_page_size must be one of {list(PAGE_SIZE_OPTIONS)}"
        )
