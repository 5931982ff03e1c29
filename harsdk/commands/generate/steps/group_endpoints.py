"""Step: Group capture entries into endpoints by method and resource name."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from harsdk.commands.generate.steps.base import Step, StepValidationError
from harsdk.commands.generate.steps.types import EndpointGroup
from harsdk.formats.har import HarEntry

# Path segments that identify a record rather than a resource: numeric IDs,
# UUIDs (optionally prefixed), long hex hashes.
_ID_SEGMENT_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"^\d+$"),
    re.compile(r"^(.+-)?[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.I),
    re.compile(r"^[0-9a-f]{20,}$", re.I),
]

ROOT_RESOURCE = "root"


class GroupEndpointsStep(Step[list[HarEntry], list[EndpointGroup]]):
    """Partition entries into endpoint groups, in first-seen order.

    Input: every entry of the capture.
    Output: one EndpointGroup per (method, resource) pair; entries whose URL
    is not absolute are dropped.
    """

    name = "group_endpoints"

    def _execute(self, input: list[HarEntry]) -> list[EndpointGroup]:
        return list(group_entries(input).values())

    def _validate_output(self, output: list[EndpointGroup]) -> None:
        seen: set[str] = set()
        for group in output:
            if not group.entries:
                raise StepValidationError(
                    f"Empty endpoint group: {group.key}", {"key": group.key}
                )
            if group.key in seen:
                raise StepValidationError(
                    f"Duplicate endpoint group: {group.key}", {"key": group.key}
                )
            seen.add(group.key)


def group_entries(entries: list[HarEntry]) -> dict[str, EndpointGroup]:
    """Group *entries* by ``METHOD_resource``, keeping capture order."""
    groups: dict[str, EndpointGroup] = {}
    for entry in entries:
        url = entry.request.url
        if not is_absolute_url(url):
            continue
        method = entry.request.method.upper()
        resource = resource_name(url)
        key = f"{method}_{resource}"
        if key not in groups:
            groups[key] = EndpointGroup(method=method, resource=resource)
        groups[key].entries.append(entry)
    return groups


def is_absolute_url(url: str) -> bool:
    """True for scheme-qualified URLs with a host (``https://host/...``).

    URLs that cannot be parsed (``http://[bad/x``) are not absolute.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def resource_name(url: str) -> str:
    """Last path segment that is not a record identifier, else ``root``.

    ``/users/42`` and ``/users`` both give ``users``, so every call on one
    collection lands in the same group whatever the ID.
    """
    segments = [s for s in urlparse(url).path.split("/") if s]
    for segment in reversed(segments):
        if not looks_like_id(segment):
            return segment
    return ROOT_RESOURCE


def looks_like_id(segment: str) -> bool:
    return any(p.match(segment) for p in _ID_SEGMENT_PATTERNS)
