"""Render a generation result as a TypeScript SDK module."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
import re

from harsdk.commands.generate.steps.types import EndpointBinding, SdkResult

_PREAMBLE = """\
import * as qs from 'qs';

export type RequestInit = Parameters<typeof fetch>[1];
export type RequestInfo = Parameters<typeof fetch>[0];
export type Response = ReturnType<typeof fetch> extends Promise<infer T> ? T : never;

export interface ApiOptions extends Omit<RequestInit, 'body' | 'method'> {
  baseUrl?: string;
  headers?: HeadersInit;
}

export const defaultOptions: ApiOptions = {
  headers: {
    'Content-Type': 'application/json',
  },
};

export interface ResponseBase<T = unknown> {
  data?: T;
}
"""

_DECLARATION_START = re.compile(r"^(interface|type) ", re.MULTILINE)


def write_typescript_sdk(
    result: SdkResult, output_path: str | Path, generated_at: datetime | None = None
) -> None:
    """Write the TypeScript SDK of *result* to *output_path*."""
    code = build_typescript_sdk(result, generated_at)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(code)


def build_typescript_sdk(result: SdkResult, generated_at: datetime | None = None) -> str:
    """Build TypeScript source: preamble, type declarations, one function per endpoint."""
    stamp = (generated_at or datetime.now(timezone.utc)).isoformat()
    lines = [
        "// Generated TypeScript SDK",
        f"// Generated on: {stamp}",
        "",
        _PREAMBLE,
    ]

    for type_def in result.types:
        lines.append(_DECLARATION_START.sub(r"export \1 ", type_def.definition))
        lines.append("")

    for binding in result.bindings:
        lines.extend(build_function(binding))
        lines.append("")

    return "\n".join(lines).rstrip("\n") + "\n"


def build_function(binding: EndpointBinding) -> list[str]:
    """Build the fetch-based function of one endpoint binding."""
    path = binding.path
    lines = [
        "/**",
        f" * {binding.method} {path.replace('*/', '*%2F')}",
        " */",
        f"export async function {binding.function_name}(",
        f"  params?: {binding.params_type},",
        f"  body?: {binding.body_type},",
        "  options: ApiOptions = {}",
        f"): Promise<{binding.response_type}> {{",
        "  const { baseUrl = "
        + _quote(binding.origin)
        + ", headers = {}, ...fetchOptions } = { ...defaultOptions, ...options };",
        "  const query = params ? `?${qs.stringify(params)}` : '';",
        "  const requestUrl = `${baseUrl}" + _template_text(path) + "${query}`;",
        "",
        "  const response = await fetch(requestUrl, {",
        f"    method: {_quote(binding.method)},",
        "    headers: {",
        "      ...headers,",
    ]
    for header in binding.headers:
        lines.append(f"      {_quote(header.name)}: {_quote(header.value)},")
    lines.append("    },")
    if binding.has_body:
        lines.append("    body: JSON.stringify(body),")
    lines.extend(
        [
            "    ...fetchOptions,",
            "  });",
            "",
            "  if (!response.ok) {",
            "    throw new Error(`HTTP error! status: ${response.status}`);",
            "  }",
            "",
            "  return response.json();",
            "}",
        ]
    )
    return lines


def _quote(value: str) -> str:
    """Single-quoted TypeScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def _template_text(value: str) -> str:
    """Escape literal text placed inside a template string."""
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
