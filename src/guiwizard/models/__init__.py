"""Descriptor data models shared by generation, extraction and preview."""

from .descriptors import (
    ControlKind,
    RGBA,
    Vec2,
    Rect,
    ControlDescriptor,
    WindowDescriptor,
    Project,
)

__all__ = [
    "ControlKind",
    "RGBA",
    "Vec2",
    "Rect",
    "ControlDescriptor",
    "WindowDescriptor",
    "Project",
]
