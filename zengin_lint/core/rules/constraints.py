"""
Field shape predicates.

Zengin numeric fields are fixed or bounded runs of ASCII digits. The checks
here compare against the ASCII character class explicitly: str.isdigit()
would also accept full-width and other Unicode digits.
"""

from __future__ import annotations

ASCII_DIGITS = frozenset("0123456789")


def is_digits_range(value: str | None, min_len: int, max_len: int) -> bool:
    """
    Check that value is min_len..max_len ASCII digits.

    Args:
        value: Quote-stripped field value (None if absent)
        min_len: Minimum number of digits
        max_len: Maximum number of digits

    Returns:
        True if the value has the required shape
    """
    if value is None:
        return False
    if not min_len <= len(value) <= max_len:
        return False
    return all(char in ASCII_DIGITS for char in value)


def is_digits(value: str | None, length: int) -> bool:
    """Check that value is exactly length ASCII digits."""
    return is_digits_range(value, length, length)


def is_one_of(value: str | None, allowed: list[str] | tuple[str, ...]) -> bool:
    return value is not None and value in allowed


def parse_digits(value: str | None, max_len: int) -> int | None:
    """
    Parse a 1..max_len digit field.

    Returns:
        The integer value, or None if the field is malformed
    """
    if not is_digits_range(value, 1, max_len):
        return None
    return int(value)  # type: ignore[arg-type]
