"""
GUI-Wizard
Declarative IMGUI window design with code generation and code extraction
"""

__version__ = "0.1.0"

from .models import (
    ControlKind,
    RGBA,
    Vec2,
    Rect,
    ControlDescriptor,
    WindowDescriptor,
    Project,
)
from .layout import absolute_rect, fits_within_window, render
from .codegen import CodeGenerator, generate_code
from .extraction import CodeExtractor, extract_window, parse_rect
from .project import ProjectSession, dumps_project, loads_project

__all__ = [
    "__version__",
    "ControlKind",
    "RGBA",
    "Vec2",
    "Rect",
    "ControlDescriptor",
    "WindowDescriptor",
    "Project",
    "absolute_rect",
    "fits_within_window",
    "render",
    "CodeGenerator",
    "generate_code",
    "CodeExtractor",
    "extract_window",
    "parse_rect",
    "ProjectSession",
    "dumps_project",
    "loads_project",
]
