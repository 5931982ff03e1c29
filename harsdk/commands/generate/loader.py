"""Load HAR captures from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from harsdk.formats.har import HarFile


class HarValidationError(ValueError):
    """Raised when a capture does not have the structure of a HAR file."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


def load_har(path: str | Path, *, validate: bool = True) -> HarFile:
    """Load a HAR file from disk."""
    return load_har_text(Path(path).read_text(encoding="utf-8"), validate=validate)


def load_har_text(text: str, *, validate: bool = True) -> HarFile:
    """Parse HAR JSON text.

    With *validate*, the root / ``log`` / ``log.entries`` structure is checked
    first and a descriptive ``HarValidationError`` is raised before any entry
    is parsed.  Without it, missing top-level fields read as an empty capture.
    """
    try:
        raw: Any = json.loads(text)
    except json.JSONDecodeError as e:
        raise HarValidationError(f"Invalid HAR file: not valid JSON ({e})") from e

    if validate:
        validate_har(raw)

    try:
        return HarFile.model_validate(raw)
    except ValidationError as e:
        raise HarValidationError(
            f"Invalid HAR file: {e.error_count()} malformed field(s)",
            {"errors": e.errors(include_url=False)},
        ) from e


def validate_har(har: Any) -> None:
    """Fail fast when the top-level HAR structure is missing."""
    if not isinstance(har, dict):
        raise HarValidationError("Invalid HAR file: Root must be an object")

    log = har.get("log")
    if not isinstance(log, dict):
        raise HarValidationError('Invalid HAR file: Missing or invalid "log" property')

    entries = log.get("entries")
    if not isinstance(entries, list):
        raise HarValidationError(
            'Invalid HAR file: Missing or invalid "entries" array',
            {"type": type(entries).__name__},
        )
