"""
Closed grammar of recognised drawing-call shapes.

Only these shapes are matched; everything else in the source is ignored.

    rect    := 'new' 'Rect' '(' FRAGMENT ')'          FRAGMENT has no ')'
    string  := '"' CHARS '"'                          CHARS non-empty, no '"'
    title   := 'GUI.Window' '(' INT ',' rect ',' IDENT ',' string
    label   := ('GUI' | 'GUILayout' | 'EditorGUILayout') '.' ('Label' | 'LabelField')
               '(' [rect ','] string
    button  := ('GUI' | 'GUILayout') '.Button' '(' [rect ','] string

Whitespace is allowed around every token. A shape that does not match is
simply absent from the results; matching never raises.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from ..models import ControlKind

_RECT = r"new\s+Rect\s*\(\s*(?P<rect>[^)]+)\)"
_OPTIONAL_RECT = rf"(?:{_RECT}\s*,\s*)?"
_STRING = r'"(?P<text>[^"]+)"'

TITLE_PATTERN = re.compile(
    r"GUI\.Window\s*\(\s*\d+\s*,\s*new\s+Rect\s*\([^)]+\)\s*,\s*\w+\s*,\s*" + _STRING
)


@dataclass(frozen=True)
class CallShape:
    """A recognised call spelling and the control kind it produces."""

    name: str
    kind: ControlKind
    pattern: re.Pattern[str]


@dataclass(frozen=True)
class CallMatch:
    """One matched call: its string argument and optional rect fragment."""

    shape: CallShape
    text: str
    rect_fragment: str | None
    start: int


LABEL_SHAPE = CallShape(
    name="label",
    kind=ControlKind.LABEL,
    pattern=re.compile(
        r"(?:GUI|GUILayout|EditorGUILayout)\.(?:Label|LabelField)\s*\(\s*"
        + _OPTIONAL_RECT
        + _STRING
    ),
)

BUTTON_SHAPE = CallShape(
    name="button",
    kind=ControlKind.BUTTON,
    pattern=re.compile(r"(?:GUI|GUILayout)\.Button\s*\(\s*" + _OPTIONAL_RECT + _STRING),
)

# Pass order decides the order extracted controls are appended in
CONTROL_SHAPES: tuple[CallShape, ...] = (LABEL_SHAPE, BUTTON_SHAPE)


def find_title(source: str) -> str | None:
    """Title string of the first window call, if any."""
    match = TITLE_PATTERN.search(source)
    return match.group("text") if match else None


def find_calls(shape: CallShape, source: str) -> Iterator[CallMatch]:
    """Yield every occurrence of a control call shape, in source order."""
    for match in shape.pattern.finditer(source):
        yield CallMatch(
            shape=shape,
            text=match.group("text"),
            rect_fragment=match.group("rect"),
            start=match.start(),
        )
