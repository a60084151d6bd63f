"""Shared field cleaning for request DTOs."""

from typing import Any


def blank_to_none(value: Any) -> Any:
    """Treat empty / whitespace-only strings in optional fields as missing."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value
