"""Code Generator - project descriptors to IMGUI drawing code."""

from collections import Counter

from ..core import get_logger
from ..layout import absolute_rect
from ..models import ControlDescriptor, ControlKind, Project, WindowDescriptor
from .formatting import (
    bool_literal,
    color_literal,
    float_literal,
    rect_literal,
    string_literal,
)

logger = get_logger(__name__)

TOOL_NAME = "GUI-Wizard"
INDENT = "    "
COLOR_RESET = "GUI.color = Color.white;"


class CodeGenerator:
    """Emits field declarations and an OnGUI routine reproducing a project."""

    def generate(self, project: Project) -> str:
        """
        Generate the full code listing for a project.

        Pure function of the project: the same project always yields the same
        text, and the project is never modified.

        Args:
            project: Project snapshot

        Returns:
            Generated source text
        """
        self._warn_duplicate_names(project)

        lines: list[str] = [
            f"// Generated by {TOOL_NAME}",
            f"// Project: {project.name}",
            "",
        ]

        for window in project.windows:
            for control in window.controls:
                declaration = self._declaration(control)
                if declaration:
                    lines.append(declaration)

        lines.append("")
        lines.append("void OnGUI()")
        lines.append("{")
        for window in project.windows:
            lines.extend(self._window_block(window))
        lines.append("}")

        code = "\n".join(lines) + "\n"
        logger.info(
            "code_generated",
            project=project.name,
            windows=len(project.windows),
            lines=len(lines),
        )
        return code

    def _declaration(self, control: ControlDescriptor) -> str | None:
        """Field declaration for stateful kinds, None for Label and Button."""
        name = control.variable_name
        if control.kind == ControlKind.TOGGLE:
            return f"private bool {name} = {bool_literal(control.toggle_value)};"
        if control.kind == ControlKind.SLIDER:
            return f"private float {name} = {float_literal(control.slider_value)};"
        if control.kind in (ControlKind.TEXT_FIELD, ControlKind.TEXT_AREA):
            return f"private string {name} = {string_literal(control.text_value)};"
        return None

    def _window_block(self, window: WindowDescriptor) -> list[str]:
        lines = [
            f"{INDENT}// Window: {window.name}",
            f"{INDENT}GUI.color = {color_literal(window.background_color)};",
            f"{INDENT}GUI.Box({rect_literal(window.rect)}, {string_literal(window.name)});",
            f"{INDENT}{COLOR_RESET}",
            "",
        ]
        for control in window.controls:
            lines.append(f"{INDENT}GUI.color = {color_literal(control.color)};")
            lines.extend(self._control_statements(window, control))
            lines.append(f"{INDENT}{COLOR_RESET}")
            lines.append("")
        return lines

    def _control_statements(self, window: WindowDescriptor, control: ControlDescriptor) -> list[str]:
        rect = rect_literal(absolute_rect(window, control))
        text = string_literal(control.text)
        name = control.variable_name

        if control.kind == ControlKind.LABEL:
            return [f"{INDENT}GUI.Label({rect}, {text});"]
        if control.kind == ControlKind.BUTTON:
            return [
                f"{INDENT}if (GUI.Button({rect}, {text}))",
                f"{INDENT}{{",
                f"{INDENT}{INDENT}// {control.text} button clicked",
                f"{INDENT}}}",
            ]
        if control.kind == ControlKind.TOGGLE:
            return [f"{INDENT}{name} = GUI.Toggle({rect}, {name}, {text});"]
        if control.kind == ControlKind.SLIDER:
            low = float_literal(control.slider_min)
            high = float_literal(control.slider_max)
            return [f"{INDENT}{name} = GUI.HorizontalSlider({rect}, {name}, {low}, {high});"]
        if control.kind == ControlKind.TEXT_FIELD:
            return [f"{INDENT}{name} = GUI.TextField({rect}, {name});"]
        return [f"{INDENT}{name} = GUI.TextArea({rect}, {name});"]

    def _warn_duplicate_names(self, project: Project) -> None:
        # Duplicates are emitted as-is; flag them so the user can rename.
        counts = Counter(
            control.variable_name
            for window in project.windows
            for control in window.controls
            if control.kind.is_stateful
        )
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            logger.warning("duplicate_variable_names", names=duplicates)


def generate_code(project: Project) -> str:
    """
    Convenience function to generate code for a project

    Args:
        project: Project snapshot

    Returns:
        Generated source text
    """
    return CodeGenerator().generate(project)
