"""Window-local to absolute coordinate mapping.

Controls are positioned relative to their window's content area, whose origin
sits CONTENT_INSET units below the window's top-left corner (the title bar).
Code generation and preview both go through these functions so the inset is
applied exactly once.
"""

from ..models import ControlDescriptor, Rect, WindowDescriptor

CONTENT_INSET = 25.0


def absolute_rect(window: WindowDescriptor, control: ControlDescriptor) -> Rect:
    """Screen rect of a control: window origin + control offset + title inset."""
    return Rect(
        x=window.position.x + control.position.x,
        y=window.position.y + control.position.y + CONTENT_INSET,
        width=control.size.x,
        height=control.size.y,
    )


def local_rect(control: ControlDescriptor) -> Rect:
    """Control rect in its window's own coordinates (inset included)."""
    return Rect(
        x=control.position.x,
        y=control.position.y + CONTENT_INSET,
        width=control.size.x,
        height=control.size.y,
    )


def fits_within_window(window: WindowDescriptor, control: ControlDescriptor) -> bool:
    """
    Whether a control lies entirely inside its window's bounds.

    Gates preview drawing only; generated code never consults it.
    """
    rect = local_rect(control)
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.x_max <= window.size.x
        and rect.y_max <= window.size.y
    )
