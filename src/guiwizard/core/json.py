"""Fast JSON decoding and encoding with multiple backends."""

from typing import Any
import json

import msgspec
import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def decode_json(text: str | bytes) -> dict[str, Any]:
    """
    Decode a JSON document whose root must be an object.

    Unlike lenient extraction, malformed input is never repaired: a project
    file that does not parse is reported, not guessed at.

    Args:
        text: JSON document

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If the document is malformed or not an object
    """
    data = text.encode("utf-8") if isinstance(text, str) else text

    try:
        result = msgspec.json.decode(data)
    except msgspec.DecodeError as e:
        raise JSONParseError(f"Invalid JSON: {e}", e) from e

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected JSON object, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    # orjson only knows a fixed two-space indent
    if indent == 2:
        try:
            return orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Use stdlib for other indents or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None)
