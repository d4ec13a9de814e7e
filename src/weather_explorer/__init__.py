# Project: weather-explorer
# Owner: GreenUnicorn
"""weather-explorer — store and browse historical weather files."""

__version__ = "0.1.0"
