# utils.py
from __future__ import annotations
from typing import Optional

from cabinet.models import SizeCategory

INVALID_SIZE_MESSAGE = "Invalid folder size."

_ALLOWED_SIZES = frozenset(category.value for category in SizeCategory)


class InvalidSizeError(ValueError):
    """Raised when a size is not one of the SizeCategory values."""

    def __init__(self, message: str = INVALID_SIZE_MESSAGE):
        super().__init__(message)


def normalize(value: Optional[str]) -> Optional[str]:
    """
    Return the comparison key for a name or size.

    Strips surrounding whitespace and lower-cases. None and blank input
    both give None.
    """
    if value is None:
        return None
    stripped = value.strip()
    return stripped.lower() if stripped else None


def assert_allowed_size(value: Optional[str]) -> str:
    """Normalize ``value`` and return it if it names a SizeCategory, else raise InvalidSizeError."""
    normalized = normalize(value)
    if normalized not in _ALLOWED_SIZES:
        raise InvalidSizeError()
    return normalized
