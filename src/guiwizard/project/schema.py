"""
Project persistence schema (version 1).

Explicit field-by-field (de)serialization; nothing is derived from model
introspection, so renaming a model field never changes the file format.

    {
      "schemaVersion": 1,
      "projectName": "...",
      "windows": [
        {
          "name": "...",
          "backgroundColor": {"r": 0.2, "g": 0.2, "b": 0.2, "a": 0.8},
          "position": {"x": 50, "y": 50},
          "size": {"x": 300, "y": 200},
          "isExpanded": true,
          "controls": [
            {"type": "Label", "text": "...", "variableName": "...",
             "color": {...}, "position": {...}, "size": {...},
             "toggleValue": false, "sliderValue": 0.5, "sliderMin": 0,
             "sliderMax": 1, "textValue": "", "isExpanded": true}
          ]
        }
      ]
    }

Reading also accepts files written by the original editor, which used
integer control types and the keys windowPosition, windowSize and
textFieldValue.
"""

from typing import Any

from pydantic import ValidationError as ModelValidationError

from ..core import (
    JSONParseError,
    ValidationError,
    decode_json,
    get_logger,
    safe_json_dumps,
    validate_document_size,
    validate_json_depth,
)
from ..models import RGBA, ControlDescriptor, ControlKind, Project, Vec2, WindowDescriptor

logger = get_logger(__name__)

SCHEMA_VERSION = 1

# Index order of the original editor's control type enum
_LEGACY_KIND_ORDER = (
    ControlKind.LABEL,
    ControlKind.BUTTON,
    ControlKind.TOGGLE,
    ControlKind.SLIDER,
    ControlKind.TEXT_FIELD,
    ControlKind.TEXT_AREA,
)


class ProjectFormatError(ValidationError):
    """Project document could not be read."""

    pass


# ----------------------------------------------------------------------------
# Encoding
# ----------------------------------------------------------------------------

def _vec_to_dict(vec: Vec2) -> dict[str, float]:
    return {"x": vec.x, "y": vec.y}


def _color_to_dict(color: RGBA) -> dict[str, float]:
    return {"r": color.r, "g": color.g, "b": color.b, "a": color.a}


def control_to_dict(control: ControlDescriptor) -> dict[str, Any]:
    return {
        "type": control.kind.value,
        "text": control.text,
        "variableName": control.variable_name,
        "color": _color_to_dict(control.color),
        "position": _vec_to_dict(control.position),
        "size": _vec_to_dict(control.size),
        "toggleValue": control.toggle_value,
        "sliderValue": control.slider_value,
        "sliderMin": control.slider_min,
        "sliderMax": control.slider_max,
        "textValue": control.text_value,
        "isExpanded": control.is_expanded,
    }


def window_to_dict(window: WindowDescriptor) -> dict[str, Any]:
    return {
        "name": window.name,
        "backgroundColor": _color_to_dict(window.background_color),
        "position": _vec_to_dict(window.position),
        "size": _vec_to_dict(window.size),
        "isExpanded": window.is_expanded,
        "controls": [control_to_dict(c) for c in window.controls],
    }


def project_to_dict(project: Project) -> dict[str, Any]:
    return {
        "schemaVersion": SCHEMA_VERSION,
        "projectName": project.name,
        "windows": [window_to_dict(w) for w in project.windows],
    }


def dumps_project(project: Project) -> str:
    """Serialize a project to indented JSON text."""
    return safe_json_dumps(project_to_dict(project), indent=2)


# ----------------------------------------------------------------------------
# Decoding
# ----------------------------------------------------------------------------

def _expect_dict(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ProjectFormatError(f"{where} must be an object, got {type(value).__name__}")
    return value


def _pick(data: dict[str, Any], *keys: str) -> Any:
    """First present, non-null value among `keys`."""
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


def _optional(**values: Any) -> dict[str, Any]:
    # Missing fields fall back to the model defaults
    return {k: v for k, v in values.items() if v is not None}


def _vec_from_dict(value: Any, where: str) -> Vec2 | None:
    if value is None:
        return None
    data = _expect_dict(value, where)
    return Vec2(**_optional(x=data.get("x"), y=data.get("y")))


def _color_from_dict(value: Any, where: str) -> RGBA | None:
    if value is None:
        return None
    data = _expect_dict(value, where)
    return RGBA(**_optional(r=data.get("r"), g=data.get("g"), b=data.get("b"), a=data.get("a")))


def _kind_from_value(value: Any, where: str) -> ControlKind | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ProjectFormatError(f"{where}: invalid control type {value!r}")
    if isinstance(value, int):
        if 0 <= value < len(_LEGACY_KIND_ORDER):
            return _LEGACY_KIND_ORDER[value]
        raise ProjectFormatError(f"{where}: unknown control type index {value}")
    try:
        return ControlKind(value)
    except ValueError as e:
        raise ProjectFormatError(f"{where}: unknown control type {value!r}") from e


def control_from_dict(value: Any, where: str = "control") -> ControlDescriptor:
    data = _expect_dict(value, where)
    return ControlDescriptor(
        **_optional(
            kind=_kind_from_value(_pick(data, "type", "kind"), where),
            text=data.get("text"),
            variable_name=data.get("variableName"),
            color=_color_from_dict(data.get("color"), f"{where}.color"),
            position=_vec_from_dict(data.get("position"), f"{where}.position"),
            size=_vec_from_dict(data.get("size"), f"{where}.size"),
            toggle_value=data.get("toggleValue"),
            slider_value=data.get("sliderValue"),
            slider_min=data.get("sliderMin"),
            slider_max=data.get("sliderMax"),
            text_value=_pick(data, "textValue", "textFieldValue"),
            is_expanded=data.get("isExpanded"),
        )
    )


def window_from_dict(value: Any, where: str = "window") -> WindowDescriptor:
    data = _expect_dict(value, where)
    controls = data.get("controls") or []
    if not isinstance(controls, list):
        raise ProjectFormatError(f"{where}.controls must be a list")

    return WindowDescriptor(
        **_optional(
            name=data.get("name"),
            background_color=_color_from_dict(data.get("backgroundColor"), f"{where}.backgroundColor"),
            position=_vec_from_dict(_pick(data, "position", "windowPosition"), f"{where}.position"),
            size=_vec_from_dict(_pick(data, "size", "windowSize"), f"{where}.size"),
            is_expanded=data.get("isExpanded"),
        ),
        controls=[control_from_dict(c, f"{where}.controls[{i}]") for i, c in enumerate(controls)],
    )


def project_from_dict(value: Any) -> Project:
    """
    Build a project from a decoded document.

    A missing, null or empty window list yields one default window, so a
    loaded project always has at least one window.

    Raises:
        ProjectFormatError: If the document does not follow the schema
    """
    data = _expect_dict(value, "project")

    version = data.get("schemaVersion", SCHEMA_VERSION)
    if not isinstance(version, int) or isinstance(version, bool) or version > SCHEMA_VERSION:
        raise ProjectFormatError(f"Unsupported schema version: {version!r}")

    windows = data.get("windows")
    if windows is not None and not isinstance(windows, list):
        raise ProjectFormatError("windows must be a list")

    try:
        project = Project(
            **_optional(name=data.get("projectName")),
            windows=[window_from_dict(w, f"windows[{i}]") for i, w in enumerate(windows or [])],
        )
    except ModelValidationError as e:
        raise ProjectFormatError(f"Invalid project field: {e}") from e

    if not project.windows:
        project.windows.append(WindowDescriptor())
    return project


def loads_project(text: str | bytes, max_size: int | None = None) -> Project:
    """
    Parse project JSON text.

    Args:
        text: JSON document
        max_size: Optional size limit in bytes

    Returns:
        Project with at least one window

    Raises:
        ProjectFormatError: If the text is oversized, malformed or off-schema
    """
    try:
        if max_size is not None:
            validate_document_size(text, max_size, "Project file")
        document = decode_json(text)
        validate_json_depth(document)
    except (JSONParseError, ValidationError) as e:
        logger.error("project_decode_failed", error=str(e))
        raise ProjectFormatError(str(e)) from e

    return project_from_dict(document)
