"""Project persistence and editing commands."""

from .schema import (
    SCHEMA_VERSION,
    ProjectFormatError,
    project_to_dict,
    project_from_dict,
    window_to_dict,
    window_from_dict,
    dumps_project,
    loads_project,
)
from .session import ProjectSession

__all__ = [
    "SCHEMA_VERSION",
    "ProjectFormatError",
    "project_to_dict",
    "project_from_dict",
    "window_to_dict",
    "window_from_dict",
    "dumps_project",
    "loads_project",
    "ProjectSession",
]
