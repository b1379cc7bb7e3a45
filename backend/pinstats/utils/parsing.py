"""Parsing helpers for upstream values that arrive as text."""

import math
from typing import Any, Optional, Union

Number = Union[int, float]


def parse_number(value: Any) -> Optional[Number]:
    """
    Parse an upstream numeric value that may arrive as text.

    Integers stay integers ("12" -> 12, "12.0" -> 12.0). Empty strings, None,
    booleans, non-finite and unparseable values become None, never zero.

    Args:
        value: Raw value from an upstream payload

    Returns:
        Parsed number or None
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        return value if math.isfinite(value) else None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return int(text)
    except ValueError:
        pass

    try:
        parsed = float(text)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def parse_int(value: Any) -> Optional[int]:
    """Parse a value to an int; fractional or unparseable values become None."""
    number = parse_number(value)
    if number is None:
        return None
    if isinstance(number, float):
        return int(number) if number.is_integer() else None
    return number


def parse_count(value: Any) -> int:
    """Parse a counter, treating a missing value as zero occurrences."""
    number = parse_number(value)
    return int(number) if number is not None else 0
