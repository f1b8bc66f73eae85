"""UI Descriptor Models.

Plain data records describing a project, its windows and their controls.
Geometry values are immutable; descriptors are mutated in place by the
editing surface and validated on assignment.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat


class ControlKind(str, Enum):
    """Closed set of control kinds."""

    LABEL = "Label"
    BUTTON = "Button"
    TOGGLE = "Toggle"
    SLIDER = "Slider"
    TEXT_FIELD = "TextField"
    TEXT_AREA = "TextArea"

    @property
    def is_stateful(self) -> bool:
        """Stateful kinds own a declared variable in generated code."""
        return self not in (ControlKind.LABEL, ControlKind.BUTTON)


class _Value(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class RGBA(_Value):
    """Colour with normalized float channels."""

    r: FiniteFloat = 1.0
    g: FiniteFloat = 1.0
    b: FiniteFloat = 1.0
    a: FiniteFloat = 1.0

    @classmethod
    def white(cls) -> "RGBA":
        return cls(r=1.0, g=1.0, b=1.0, a=1.0)


class Vec2(_Value):
    """2D offset or extent."""

    x: FiniteFloat = 0.0
    y: FiniteFloat = 0.0


class Rect(_Value):
    """
    Axis-aligned rectangle, top-left origin.

    Derived from descriptor geometry rather than entered directly. Sums of
    large finite offsets can overflow to infinity, so fields are plain floats.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def x_max(self) -> float:
        return self.x + self.width

    @property
    def y_max(self) -> float:
        return self.y + self.height

    @classmethod
    def from_vectors(cls, position: Vec2, size: Vec2) -> "Rect":
        return cls(x=position.x, y=position.y, width=size.x, height=size.y)


class _Descriptor(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")


class ControlDescriptor(_Descriptor):
    """A single control placed inside a window's content area."""

    kind: ControlKind = ControlKind.LABEL
    text: str = "New Control"
    variable_name: str = "control"
    color: RGBA = Field(default_factory=RGBA.white)
    position: Vec2 = Field(default_factory=lambda: Vec2(x=10.0, y=10.0))
    size: Vec2 = Field(default_factory=lambda: Vec2(x=100.0, y=30.0))

    # Kind-specific values, always present
    toggle_value: bool = False
    slider_value: FiniteFloat = 0.5
    slider_min: FiniteFloat = 0.0
    slider_max: FiniteFloat = 1.0
    text_value: str = ""

    # Presentation state of the editing surface
    is_expanded: bool = True


class WindowDescriptor(_Descriptor):
    """A window owning an ordered list of controls (z-order and emission order)."""

    name: str = "New Window"
    background_color: RGBA = Field(default_factory=lambda: RGBA(r=0.2, g=0.2, b=0.2, a=0.8))
    position: Vec2 = Field(default_factory=lambda: Vec2(x=50.0, y=50.0))
    size: Vec2 = Field(default_factory=lambda: Vec2(x=300.0, y=200.0))
    controls: list[ControlDescriptor] = Field(default_factory=list)
    is_expanded: bool = True

    @property
    def rect(self) -> Rect:
        return Rect.from_vectors(self.position, self.size)

    def deep_copy(self) -> "WindowDescriptor":
        """Independent copy; no control is shared with the original."""
        return self.model_copy(deep=True)


class Project(_Descriptor):
    """Project name plus the ordered window list it exclusively owns."""

    name: str = "Basic Project"
    windows: list[WindowDescriptor] = Field(default_factory=list)
