"""HTTP header utilities."""

from __future__ import annotations

from collections.abc import Iterable

from harsdk.formats.har import HarHeader

FORM_MIME_TYPE = "application/x-www-form-urlencoded"


def get_header(headers: Iterable[HarHeader], name: str) -> str | None:
    """Get a header value by name (case-insensitive, first match wins)."""
    name_lower = name.lower()
    for h in headers:
        if h.name.lower() == name_lower:
            return h.value
    return None


def is_form_mime_type(mime_type: str | None) -> bool:
    """True when *mime_type* declares URL-encoded form data (parameters ignored)."""
    return mime_type is not None and FORM_MIME_TYPE in mime_type.lower()


def is_pseudo_header(name: str) -> bool:
    """HTTP/2 pseudo-headers (``:authority``, ``:path``…) are never replayed."""
    return name.startswith(":")
