"""Rect literal parsing for extracted calls."""

import re

from ..models import Vec2

# One optional type suffix (float, double, decimal)
_SUFFIXES = "fFdDmM"
_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(field: str) -> float | None:
    """Parse one numeric literal field, or None if it is anything else."""
    text = field.strip()
    if text and text[-1] in _SUFFIXES:
        text = text[:-1]
    if not _DECIMAL.fullmatch(text):
        return None
    value = float(text)
    # overflowing literals like 1e999
    if value in (float("inf"), float("-inf")):
        return None
    return value


def parse_rect(fragment: str) -> tuple[Vec2, Vec2] | None:
    """
    Parse the argument text of a four-number rect literal.

    Args:
        fragment: Text between the rect's parentheses, e.g. "10f, 20, 100, 30f"

    Returns:
        (position, size), or None when fewer than four fields are present or
        any of the first four is not a plain number
    """
    fields = fragment.split(",")
    if len(fields) < 4:
        return None

    values = [parse_number(field) for field in fields[:4]]
    if any(value is None for value in values):
        return None

    x, y, width, height = values
    return Vec2(x=x, y=y), Vec2(x=width, y=height)
