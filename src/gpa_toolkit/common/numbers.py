"""Lenient numeric parsing for form input."""

from __future__ import annotations

from typing import Optional


def parse_float(text: Optional[str], default: float) -> float:
    """
    Parse a user-entered number, returning ``default`` when it is not numeric.

    Surrounding whitespace is ignored and a comma decimal separator is
    accepted ("3,5" -> 3.5).

    Example:
        >>> parse_float(" 82.5 ", 0.0)
        82.5
        >>> parse_float("abc", 1.0)
        1.0
    """
    if text is None:
        return default
    cleaned = text.strip().replace(",", ".")
    if not cleaned:
        return default
    try:
        return float(cleaned)
    except ValueError:
        return default
