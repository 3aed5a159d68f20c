"""Argument validation helpers shared by the registry clients."""

from typing import Optional

from .errors import ArgumentEmptyError


def ensure_not_empty(name: str, value: Optional[str]) -> str:
    """
    Check that a string argument holds something other than whitespace.

    Args:
        name: Argument name reported in the error
        value: Value to check

    Returns:
        The value, unchanged (not trimmed)

    Raises:
        ArgumentEmptyError: If the value is None, empty or whitespace-only
    """
    if value is None or not value.strip():
        raise ArgumentEmptyError(name)
    return value
