# Project: weather-explorer
# Owner: GreenUnicorn
"""
errors.py — Exception types shared by the validator, the API client and
the data transforms.

Every exception carries a message that is safe to show in the UI as-is.
"""


class ValidationError(ValueError):
    """Raised when the form input cannot be turned into a backend request."""


class InvalidLatitude(ValidationError):
    def __init__(self, message: str = "Latitude must be between -90 and 90"):
        super().__init__(message)


class InvalidLongitude(ValidationError):
    def __init__(self, message: str = "Longitude must be between -180 and 180"):
        super().__init__(message)


class MissingDate(ValidationError):
    def __init__(self, message: str = "Please select both start and end dates"):
        super().__init__(message)


class InvalidDate(ValidationError):
    def __init__(self, message: str = "Dates must use the YYYY-MM-DD format"):
        super().__init__(message)


class InvalidDateOrder(ValidationError):
    def __init__(self, message: str = "End date must be after start date"):
        super().__init__(message)


class RangeTooLong(ValidationError):
    def __init__(self, message: str = "Date range must be 31 days or less"):
        super().__init__(message)


class DateTooRecent(ValidationError):
    def __init__(self, message: str = "Dates must be yesterday or earlier"):
        super().__init__(message)


class TransportError(RuntimeError):
    """Raised when a backend call fails: network error, timeout or non-2xx.

    Attributes:
        detail: Human-readable failure text (backend 'detail' when provided).
        status_code: HTTP status code, or None if no response was received.
    """

    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class MalformedSeries(ValueError):
    """Raised when a weather payload does not match the daily series contract."""
