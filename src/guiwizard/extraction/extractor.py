"""Code Extractor - best-effort recovery of a window from IMGUI source."""

from dataclasses import dataclass

from returns.result import Failure, Result, Success

from ..core import get_logger
from ..models import ControlDescriptor, Vec2, WindowDescriptor
from .grammar import CONTROL_SHAPES, CallMatch, find_calls, find_title
from .rect import parse_rect

logger = get_logger(__name__)

IMPORTED_WINDOW_NAME = "Imported Code"


@dataclass(frozen=True)
class ExtractionFailure:
    """Nothing recognisable was found in the source."""

    message: str = "No compatible GUI elements found in the code."


class CodeExtractor:
    """Scans source text for label, button and window-title calls."""

    def __init__(self) -> None:
        self.default_position = Vec2(x=0.0, y=0.0)
        self.default_size = Vec2(x=100.0, y=20.0)

    def extract(self, source: str) -> WindowDescriptor:
        """
        Build a new window from the recognised calls in `source`.

        Always returns a window; it has no controls when nothing matched.
        Label matches are appended before button matches.

        Args:
            source: Arbitrary source text

        Returns:
            New window descriptor
        """
        window = WindowDescriptor(name=IMPORTED_WINDOW_NAME)

        title = find_title(source)
        if title is not None:
            window.name = title

        for shape in CONTROL_SHAPES:
            for call in find_calls(shape, source):
                window.controls.append(self._control_from_call(call))

        logger.info(
            "code_extracted",
            window=window.name,
            controls=len(window.controls),
            chars=len(source),
        )
        return window

    def _control_from_call(self, call: CallMatch) -> ControlDescriptor:
        position, size = self.default_position, self.default_size

        if call.rect_fragment is not None:
            parsed = parse_rect(call.rect_fragment)
            if parsed is not None:
                position, size = parsed
            else:
                logger.debug("rect_fallback", fragment=call.rect_fragment, offset=call.start)

        return ControlDescriptor(
            kind=call.shape.kind,
            text=call.text,
            position=position,
            size=size,
        )


def extract_window(source: str) -> Result[WindowDescriptor, ExtractionFailure]:
    """
    Extract a window (Result pattern version).

    Args:
        source: Arbitrary source text

    Returns:
        Success with the window when at least one control was recognised,
        Failure otherwise
    """
    window = CodeExtractor().extract(source)
    if not window.controls:
        return Failure(ExtractionFailure())
    return Success(window)
