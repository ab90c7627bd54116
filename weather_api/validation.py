"""Zip code validation."""

import re

from weather_api.errors import ZipCodeValidationError

# 5 ASCII digits, optionally followed by a hyphen and 4 digits
ZIP_CODE_PATTERN = re.compile(r"^\d{5}(-\d{4})?$", re.ASCII)

MISSING_ZIP_CODE_MESSAGE = "zip_code parameter is required"
INVALID_ZIP_CODE_MESSAGE = "zip_code must be in format XXXXX or XXXXX-XXXX"


def is_valid_zip_code(zip_code: str) -> bool:
    """Return True if ``zip_code`` is ``XXXXX`` or ``XXXXX-XXXX``.

    The value is not trimmed: surrounding whitespace makes it invalid.
    """
    # fullmatch: "$" alone would accept a trailing newline
    return ZIP_CODE_PATTERN.fullmatch(zip_code) is not None


def validate_zip_code(zip_code: str | None) -> str:
    """Validate a zip code taken from a request.

    Args:
        zip_code: Raw query parameter value (None when absent)

    Returns:
        The zip code, unchanged

    Raises:
        ZipCodeValidationError: If the value is missing/empty or malformed
    """
    if not zip_code:
        raise ZipCodeValidationError(MISSING_ZIP_CODE_MESSAGE)
    if not is_valid_zip_code(zip_code):
        raise ZipCodeValidationError(INVALID_ZIP_CODE_MESSAGE)
    return zip_code


def zip5(zip_code: str) -> str:
    """Return the 5-digit portion of a validated zip code."""
    return zip_code[:5]
