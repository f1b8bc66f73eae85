"""Project session - the command surface used by an editing front end."""

from pathlib import Path

from returns.result import Failure, Result, Success

from ..codegen import CodeGenerator
from ..core import (
    LogContext,
    ValidationError,
    ValidationResult,
    get_logger,
    get_settings,
    validate_document_size,
)
from ..extraction import CodeExtractor
from ..layout import DrawCommand, render
from ..models import ControlDescriptor, Project, WindowDescriptor
from .schema import ProjectFormatError, dumps_project, loads_project

logger = get_logger(__name__)


class ProjectSession:
    """
    Holds the project being edited plus the selected window index.

    Every command is synchronous. Failed loads leave the project untouched,
    and the window list never drops below one entry through these commands.
    """

    def __init__(self, project: Project | None = None) -> None:
        self.settings = get_settings()
        self.generator = CodeGenerator()
        self.extractor = CodeExtractor()
        self.project = project or Project(windows=[WindowDescriptor()])
        if not self.project.windows:
            self.project.windows.append(WindowDescriptor())
        self.selected_index = 0

    @property
    def selected_window(self) -> WindowDescriptor:
        return self.project.windows[self.selected_index]

    # ------------------------------------------------------------------
    # Project lifecycle
    # ------------------------------------------------------------------

    def new_project(self) -> None:
        """Reset to a fresh project with one default window."""
        self.project = Project(
            name=self.settings.default_project_name,
            windows=[WindowDescriptor()],
        )
        self.selected_index = 0
        logger.info("project_created", project=self.project.name)

    def save_project(self) -> str:
        """Serialize the current project to JSON text."""
        return dumps_project(self.project)

    def load_project(self, text: str | bytes) -> Result[Project, ValidationResult]:
        """Replace the current project with a parsed one; untouched on failure."""
        try:
            project = loads_project(text, max_size=self.settings.max_document_bytes)
        except ProjectFormatError as e:
            return Failure(ValidationResult(f"Failed to load project file: {e}"))

        self.project = project
        self.selected_index = 0
        logger.info("project_loaded", project=project.name, windows=len(project.windows))
        return Success(project)

    def save_project_file(self, path: str | Path) -> Path:
        target = Path(path)
        target.write_text(self.save_project(), encoding="utf-8")
        logger.info("project_saved", path=str(target))
        return target

    def load_project_file(self, path: str | Path) -> Result[Project, ValidationResult]:
        source = Path(path)
        try:
            text = source.read_bytes()
        except OSError as e:
            return Failure(ValidationResult(f"Cannot read {source}: {e}", field="path"))
        return self.load_project(text)

    # ------------------------------------------------------------------
    # Code in / code out
    # ------------------------------------------------------------------

    def load_code(self, source: str) -> Result[WindowDescriptor, ValidationResult]:
        """Extract a window from source text and append it as the selection."""
        try:
            validate_document_size(source, self.settings.max_document_bytes, "Source")
        except ValidationError as e:
            return Failure(ValidationResult(str(e), field="source"))

        with LogContext(project=self.project.name):
            window = self.extractor.extract(source)
            if not window.controls:
                logger.info("code_import_empty")
                return Failure(ValidationResult("No compatible GUI elements found in the code."))

            self.project.windows.append(window)
            self.selected_index = len(self.project.windows) - 1
            logger.info("code_imported", window=window.name, controls=len(window.controls))
            return Success(window)

    def load_code_file(self, path: str | Path) -> Result[WindowDescriptor, ValidationResult]:
        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            return Failure(ValidationResult(f"Cannot read {source}: {e}", field="path"))
        return self.load_code(text)

    def generate_code(self) -> str:
        with LogContext(project=self.project.name):
            return self.generator.generate(self.project)

    def preview(self) -> list[DrawCommand]:
        return render(self.project)

    # ------------------------------------------------------------------
    # Window and control editing
    # ------------------------------------------------------------------

    def _window(self, index: int) -> WindowDescriptor:
        if not 0 <= index < len(self.project.windows):
            raise IndexError(f"window index {index} out of range")
        return self.project.windows[index]

    def add_window(self) -> WindowDescriptor:
        window = WindowDescriptor(name=f"Window {len(self.project.windows) + 1}")
        self.project.windows.append(window)
        return window

    def duplicate_window(self, index: int) -> WindowDescriptor:
        """
        Append a deep copy of a window.

        Raises:
            IndexError: If no window has this index
        """
        copy = self._window(index).deep_copy()
        copy.name += " Copy"
        self.project.windows.append(copy)
        return copy

    def delete_window(self, index: int) -> bool:
        """Delete a window unless it is the last one left or does not exist."""
        if not 0 <= index < len(self.project.windows):
            logger.warning("delete_window_out_of_range", index=index)
            return False
        if len(self.project.windows) <= 1:
            logger.warning("delete_last_window_refused")
            return False

        removed = self.project.windows.pop(index)
        self.selected_index = max(0, min(index - 1, len(self.project.windows) - 1))
        logger.info("window_deleted", window=removed.name)
        return True

    def add_control(self, window_index: int) -> ControlDescriptor:
        """Raises IndexError for an unknown window."""
        window = self._window(window_index)
        control = ControlDescriptor(variable_name=f"control{len(window.controls) + 1}")
        window.controls.append(control)
        return control

    def remove_control(self, window_index: int, control_index: int) -> ControlDescriptor:
        """
        Remove and return a control.

        Raises:
            IndexError: If the window or control index does not exist
        """
        controls = self._window(window_index).controls
        if not 0 <= control_index < len(controls):
            raise IndexError(f"control index {control_index} out of range")
        return controls.pop(control_index)
