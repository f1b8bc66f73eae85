"""Preview renderer producing draw commands on demand."""

import math
from dataclasses import dataclass

from ..core import get_logger
from ..models import RGBA, ControlKind, Project, Rect
from .mapper import absolute_rect, fits_within_window

logger = get_logger(__name__)

TITLE_MARGIN = 5.0
TITLE_HEIGHT = 20.0


@dataclass(frozen=True)
class BoxCommand:
    """Filled window background."""

    rect: Rect
    color: RGBA


@dataclass(frozen=True)
class TitleCommand:
    """Window title text."""

    rect: Rect
    text: str


@dataclass(frozen=True)
class ControlCommand:
    """One visible control with its kind's display payload."""

    kind: ControlKind
    rect: Rect
    color: RGBA
    text: str = ""
    toggle_value: bool = False
    slider_value: float = 0.0
    slider_min: float = 0.0
    slider_max: float = 0.0
    text_value: str = ""


DrawCommand = BoxCommand | TitleCommand | ControlCommand


def render(project: Project) -> list[DrawCommand]:
    """
    Build the draw command list for a project snapshot.

    Windows are emitted in order, each followed by its title and then its
    controls in z-order. Controls that do not fit their window, or whose
    screen position overflows, are skipped.
    """
    commands: list[DrawCommand] = []

    for window in project.windows:
        frame = window.rect
        commands.append(BoxCommand(rect=frame, color=window.background_color))
        commands.append(
            TitleCommand(
                rect=Rect(
                    x=frame.x + TITLE_MARGIN,
                    y=frame.y + TITLE_MARGIN,
                    width=frame.width - 2 * TITLE_MARGIN,
                    height=TITLE_HEIGHT,
                ),
                text=window.name,
            )
        )

        for index, control in enumerate(window.controls):
            if not fits_within_window(window, control):
                logger.debug("control_clipped", window=window.name, index=index)
                continue

            rect = absolute_rect(window, control)
            if not all(math.isfinite(v) for v in (rect.x, rect.y, rect.width, rect.height)):
                logger.debug("control_offscreen", window=window.name, index=index)
                continue

            commands.append(
                ControlCommand(
                    kind=control.kind,
                    rect=rect,
                    color=control.color,
                    text=control.text,
                    toggle_value=control.toggle_value,
                    slider_value=control.slider_value,
                    slider_min=control.slider_min,
                    slider_max=control.slider_max,
                    text_value=control.text_value,
                )
            )

    return commands
