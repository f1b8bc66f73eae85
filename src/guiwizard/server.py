"""
GUI-Wizard HTTP adapter
Exposes generation, extraction and preview to an external editing surface
"""

from typing import Any

from fastapi import Body, FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .codegen import CodeGenerator
from .core import (
    ExtractionRequest,
    ValidationError,
    configure_from_settings,
    get_logger,
    get_settings,
    validate_json_depth,
)
from .extraction import extract_window
from .layout import BoxCommand, DrawCommand, TitleCommand, render
from .models import Project, Rect
from .project import project_from_dict, project_to_dict, window_to_dict

logger = get_logger(__name__)

app = FastAPI(
    title="GUI-Wizard",
    description="IMGUI code generation and extraction",
    version=__version__,
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("request_rejected", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"error": str(exc)})


def _project(document: dict[str, Any]) -> Project:
    validate_json_depth(document)
    return project_from_dict(document)


def _rect_to_dict(rect: Rect) -> dict[str, float]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def _command_to_dict(command: DrawCommand) -> dict[str, Any]:
    if isinstance(command, BoxCommand):
        return {"type": "box", "rect": _rect_to_dict(command.rect), "color": command.color.model_dump()}
    if isinstance(command, TitleCommand):
        return {"type": "title", "rect": _rect_to_dict(command.rect), "text": command.text}
    return {
        "type": "control",
        "kind": command.kind.value,
        "rect": _rect_to_dict(command.rect),
        "color": command.color.model_dump(),
        "text": command.text,
        "toggleValue": command.toggle_value,
        "sliderValue": command.slider_value,
        "sliderMin": command.slider_min,
        "sliderMax": command.slider_max,
        "textValue": command.text_value,
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint"""
    return {"status": "online", "service": "gui-wizard", "version": __version__}


@app.post("/generate")
async def generate(document: dict[str, Any] = Body(...)) -> dict[str, str]:
    """Generate IMGUI code for a project document."""
    return {"code": CodeGenerator().generate(_project(document))}


@app.post("/extract")
async def extract(request: ExtractionRequest) -> JSONResponse:
    """Extract a window from source text; 422 when nothing is recognised."""
    result = extract_window(request.source)
    window = result.value_or(None)
    if window is None:
        failure = result.failure()
        return JSONResponse(status_code=422, content={"error": failure.message})
    return JSONResponse(content=window_to_dict(window))


@app.post("/preview")
async def preview(document: dict[str, Any] = Body(...)) -> dict[str, list[dict[str, Any]]]:
    """Draw commands for the live preview."""
    return {"commands": [_command_to_dict(c) for c in render(_project(document))]}


@app.post("/project/normalize")
async def normalize(document: dict[str, Any] = Body(...)) -> dict[str, Any]:
    """Rewrite any accepted project document in the current schema."""
    return project_to_dict(_project(document))


def main() -> None:
    import uvicorn

    settings = get_settings()
    configure_from_settings(settings)
    logger.info("server_starting", host=settings.api_host, port=settings.api_port)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
