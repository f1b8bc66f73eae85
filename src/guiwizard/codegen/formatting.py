"""Literal formatting for generated IMGUI code.

Numbers are rendered without consulting the locale: integral values drop the
fractional part, everything else uses the shortest decimal that round-trips.
Float literals carry the `f` suffix; values that overflowed to infinity are
written as the float constants instead.
"""

import math

from ..models import RGBA, Rect

# repr() switches to exponent form beyond this magnitude anyway
_INTEGRAL_LIMIT = 1e16


def format_number(value: float) -> str:
    """Decimal text for a finite float."""
    value = float(value)
    if value == 0:
        # also folds -0.0
        return "0"
    if value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
        return str(int(value))
    return repr(value)


def float_literal(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "float.NaN"
    if math.isinf(value):
        return "float.PositiveInfinity" if value > 0 else "float.NegativeInfinity"
    return f"{format_number(value)}f"


def bool_literal(value: bool) -> str:
    return "true" if value else "false"


def string_literal(value: str) -> str:
    """Quoted string, content kept verbatim."""
    return f'"{value}"'


def rect_literal(rect: Rect) -> str:
    args = ", ".join(float_literal(v) for v in (rect.x, rect.y, rect.width, rect.height))
    return f"new Rect({args})"


def color_literal(color: RGBA) -> str:
    args = ", ".join(float_literal(v) for v in (color.r, color.g, color.b, color.a))
    return f"new Color({args})"
