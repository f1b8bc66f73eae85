"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .validate import (
    ValidationError,
    ValidationResult,
    ExtractionRequest,
    validate_document_size,
    validate_json_depth,
)
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import decode_json, safe_json_dumps, JSONParseError


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ExtractionRequest",
    "validate_document_size",
    "validate_json_depth",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "decode_json",
    "safe_json_dumps",
    "JSONParseError",
]
