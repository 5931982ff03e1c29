"""Step: Infer, deduplicate and name the types of every endpoint group."""

from __future__ import annotations

import base64
from urllib.parse import parse_qsl, urlparse

from harsdk.commands.generate.context import GenerationContext
from harsdk.commands.generate.inference import infer, render_interface
from harsdk.commands.generate.steps.base import Step
from harsdk.commands.generate.steps.types import (
    EndpointBinding,
    EndpointGroup,
    SdkResult,
)
from harsdk.formats.har import HarEntry
from harsdk.helpers.console import warn
from harsdk.helpers.http import get_header, is_pseudo_header
from harsdk.helpers.naming import title_case_join, to_identifier

QUERY_VALUE_TYPE = "string | number | boolean"
DEFAULT_PARAMS_TYPE = "Record<string, string | number | boolean | undefined>"
DEFAULT_RESPONSE_TYPE = "ResponseBase<unknown>"
NO_BODY_TYPE = "undefined"
MAX_FUNCTION_NAME = 80


class AssembleStep(Step[list[EndpointGroup], SdkResult]):
    """Resolve params/body/response types and one binding per endpoint group.

    Types are registered in the context's type registry as they are inferred;
    the result lists every registered definition, in registration order.
    """

    name = "assemble"

    def __init__(self, context: GenerationContext) -> None:
        super().__init__()
        self.context = context

    def _execute(self, input: list[EndpointGroup]) -> SdkResult:
        bindings = [build_binding(group, self.context) for group in input]
        return SdkResult(types=list(self.context.types), bindings=bindings)


def build_binding(group: EndpointGroup, context: GenerationContext) -> EndpointBinding:
    """Build the binding of one group, registering the types it needs.

    When several entries carry a body, the last one registered is the
    group's representative type.  An entry that fails is reported and skipped.
    """
    stem = context.options.type_prefix + title_case_join(group.resource)
    first = group.entries[0].request
    parsed = urlparse(first.url)

    params_type = _params_type(group, f"{stem}Params", context)

    body_type = NO_BODY_TYPE
    for entry in group.entries:
        text, mime_type = request_body(entry)
        if not text:
            continue
        try:
            body_type = _register_sample(f"{stem}Request", text, mime_type, context)
        except Exception as e:
            warn(f"Failed to infer request body for {entry.request.url}: {e}")

    response_type = DEFAULT_RESPONSE_TYPE
    for entry in group.entries:
        try:
            text, mime_type = response_body(entry)
            if not text:
                continue
            name = _register_sample(f"{stem}Response", text, mime_type, context)
            response_type = f"ResponseBase<{name}>"
        except Exception as e:
            warn(f"Failed to parse response for {entry.request.url}: {e}")

    return EndpointBinding(
        function_name=context.function_names.assign(
            group.key, function_name(group.method, first.url)
        ),
        method=group.method,
        origin=f"{parsed.scheme}://{parsed.netloc}",
        path=parsed.path or "/",
        params_type=params_type,
        body_type=body_type,
        response_type=response_type,
        headers=[h for h in first.headers if not is_pseudo_header(h.name)],
    )


def _register_sample(
    stem: str, text: str, mime_type: str | None, context: GenerationContext
) -> str:
    """Infer one body sample and return the type name callers must reference."""
    types = context.types
    candidate = types.available_name(f"{stem}{len(types) or ''}")
    definition = infer(candidate, text, mime_type, context.identifiers)
    name, _ = types.register(candidate, definition)
    return name


def _params_type(group: EndpointGroup, stem: str, context: GenerationContext) -> str:
    query = collect_query_params(group.entries)
    if not query:
        return DEFAULT_PARAMS_TYPE
    candidate = context.types.available_name(stem)
    fields = [
        (context.identifiers.normalize(key), QUERY_VALUE_TYPE, True) for key in query
    ]
    name, _ = context.types.register(candidate, render_interface(candidate, fields))
    return name


def collect_query_params(entries: list[HarEntry]) -> dict[str, set[str]]:
    """Union of the query keys of *entries*, first-seen order, with observed values."""
    params: dict[str, set[str]] = {}
    for entry in entries:
        query = urlparse(entry.request.url).query
        for key, value in parse_qsl(query, keep_blank_values=True):
            params.setdefault(key, set()).add(value)
    return params


def request_body(entry: HarEntry) -> tuple[str | None, str | None]:
    """Request body text and mime type (falls back to the Content-Type header)."""
    post_data = entry.request.post_data
    if post_data is None or not post_data.text:
        return None, None
    mime_type = post_data.mime_type or get_header(entry.request.headers, "content-type")
    return post_data.text, mime_type


def response_body(entry: HarEntry) -> tuple[str | None, str | None]:
    """Response body text and mime type; base64 bodies are decoded as UTF-8.

    Raises ``ValueError`` for a base64 body that is not UTF-8 text.
    """
    content = entry.response.content
    if content is None or not content.text:
        return None, None
    text = content.text
    if content.encoding == "base64":
        text = base64.b64decode(text).decode("utf-8")
    mime_type = content.mime_type or get_header(entry.response.headers, "content-type")
    return text, mime_type


def function_name(method: str, url: str) -> str:
    """``GET https://api.x.com/users?q=1`` → ``get_api_x_com_users``."""
    parsed = urlparse(url)
    clean = to_identifier(parsed.netloc + parsed.path, fallback="root")
    clean = clean[:MAX_FUNCTION_NAME].rstrip("_")
    return f"{to_identifier(method.lower(), fallback='call')}_{clean}"
