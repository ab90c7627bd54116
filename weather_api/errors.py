"""Error types for the Weather API gateway.

Every error the service reports to a client is rendered with the same
envelope: ``{"error": "<message>"}``.

Error taxonomy:
- ZipCodeValidationError: missing or malformed ``zip_code`` (400)
- UpstreamError: the weather provider call failed (400, message verbatim)
"""

from typing import Any

from fastapi import status


class WeatherAPIError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ZipCodeValidationError(WeatherAPIError):
    """Raised when the ``zip_code`` query parameter is missing or malformed."""


class UpstreamError(WeatherAPIError):
    """Raised when the upstream weather provider cannot deliver data.

    Covers transport failures, non-200 statuses, unreadable bodies and
    unparseable payloads.
    """


def create_error_response(message: str) -> dict[str, Any]:
    """Create the error body returned to clients.

    Args:
        message: Human-readable error message

    Returns:
        dict: ``{"error": message}``
    """
    return {"error": message}
