"""Layout mapping and preview rendering."""

from .mapper import CONTENT_INSET, absolute_rect, local_rect, fits_within_window
from .preview import (
    BoxCommand,
    TitleCommand,
    ControlCommand,
    DrawCommand,
    render,
)

__all__ = [
    "CONTENT_INSET",
    "absolute_rect",
    "local_rect",
    "fits_within_window",
    "BoxCommand",
    "TitleCommand",
    "ControlCommand",
    "DrawCommand",
    "render",
]
