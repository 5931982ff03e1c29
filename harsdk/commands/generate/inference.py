"""Schema inference: one sample payload in, TypeScript type text out.

``infer`` is the single entry point used by the assembler.  It never raises:
a payload that cannot be understood yields a permissive fallback type and a
warning on the console, so one malformed sample never aborts a run.

Decision order:

1. form mime type → key/value fields (``Record<string, string>`` if the
   form data itself is malformed);
2. JSON text (or an already-parsed value) whose root is an object →
   one root interface plus auxiliary interfaces for nested objects;
3. JSON text that fails to parse → retried as form data;
4. anything else → ``type <name> = any;``.
"""

from __future__ import annotations

import json
import re
from typing import Union
from urllib.parse import parse_qsl

from harsdk.commands.generate.fingerprint import fingerprint
from harsdk.helpers.console import warn
from harsdk.helpers.http import is_form_mime_type
from harsdk.helpers.naming import IdentifierRegistry, title_case_join

JsonValue = Union[None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]]

_TS_KIND = {
    "boolean": "boolean",
    "number": "number",
    "string": "string",
}

_FORM_NUMBER = re.compile(r"-?[0-9]+")


def infer(
    name: str,
    payload: str | JsonValue,
    mime_type: str | None,
    identifiers: IdentifierRegistry,
) -> str:
    """Infer the type definition text for one body sample.

    *name* is the declared name of the root type; nested object shapes get
    auxiliary interfaces named ``<name><Key>``.  Field names pass through
    *identifiers* so they are valid and unique for the whole run.
    """
    if is_form_mime_type(mime_type):
        if not isinstance(payload, str):
            warn(f"Form data for {name} is not text, fallback to 'any'")
            return any_type(name)
        try:
            return infer_form(name, payload, identifiers, strict=False)
        except ValueError as e:
            warn(f"Failed to generate type for form data {name}: {e}")
            return f"type {name} = Record<string, string>;"

    if isinstance(payload, str):
        try:
            parsed: JsonValue = json.loads(payload)
        except (ValueError, RecursionError) as e:
            try:
                return infer_form(name, payload, identifiers)
            except ValueError:
                warn(f"Failed to generate type for {name} as both JSON and form data ({e}), fallback to 'any'")
                return any_type(name)
    else:
        parsed = payload

    if not isinstance(parsed, dict):
        warn(f"Failed to generate type for {name}: root is not an object, fallback to 'any'")
        return any_type(name)

    try:
        return _ObjectInferrer(name, identifiers).infer(parsed)
    except RecursionError:
        warn(f"Failed to generate type for {name}: payload nested too deeply, fallback to 'any'")
        return any_type(name)


def infer_form(
    name: str, text: str, identifiers: IdentifierRegistry, *, strict: bool = True
) -> str:
    """Infer an interface from URL-encoded form data.

    With *strict*, every field must be a ``key=value`` pair; otherwise empty
    fields are skipped and a bare key reads as an empty value.  Raises
    ``ValueError`` when *text* is malformed or holds no field at all.  A key
    repeated in the form yields one field typed from its last value.
    """
    pairs = parse_qsl(text, keep_blank_values=True, strict_parsing=strict)
    if not pairs:
        raise ValueError("no form fields")
    fields: dict[str, str] = {}
    for key, value in pairs:
        fields[identifiers.normalize(key)] = form_value_type(value)
    return render_interface(name, [(field, ts_type, False) for field, ts_type in fields.items()])


def form_value_type(value: str) -> str:
    """Classify a form value: integers are numbers, true/false are booleans."""
    if _FORM_NUMBER.fullmatch(value):
        return "number"
    if value.lower() in ("true", "false"):
        return "boolean"
    return "string"


def any_type(name: str) -> str:
    return f"type {name} = any;"


def render_interface(name: str, fields: list[tuple[str, str, bool]]) -> str:
    """Render ``(field, type, optional)`` triples as an interface declaration."""
    lines = [f"interface {name} {{"]
    for field, ts_type, optional in fields:
        marker = "?" if optional else ""
        lines.append(f"  {field}{marker}: {ts_type};")
    lines.append("}")
    return "\n".join(lines)


def _kind(value: JsonValue) -> str:
    """Map a JSON value to its kind name."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "string"


class _ObjectInferrer:
    """Walks one JSON object and collects its auxiliary interfaces.

    Auxiliary shapes are deduplicated by fingerprint within this walk only;
    deduplication across samples is the type registry's job.
    """

    def __init__(self, root_name: str, identifiers: IdentifierRegistry) -> None:
        self.root_name = root_name
        self.identifiers = identifiers
        self._declarations: list[str] = []
        self._names_by_fingerprint: dict[str, str] = {}
        self._used_names: set[str] = {root_name}

    def infer(self, obj: dict[str, JsonValue]) -> str:
        root = render_interface(self.root_name, self._fields([obj]))
        return "\n\n".join([root, *self._declarations])

    def _fields(self, samples: list[dict[str, JsonValue]]) -> list[tuple[str, str, bool]]:
        """Union of the samples' keys; keys missing from some samples are optional."""
        values_by_key: dict[str, list[JsonValue]] = {}
        for sample in samples:
            for key, value in sample.items():
                values_by_key.setdefault(key, []).append(value)

        fields: list[tuple[str, str, bool]] = []
        for key, values in values_by_key.items():
            optional = len(values) < len(samples)
            fields.append((self.identifiers.normalize(key), self._value_type(key, values), optional))
        return fields

    def _value_type(self, key: str, values: list[JsonValue]) -> str:
        # A leading null must not shadow the real type; all-null is unknown.
        non_null = [v for v in values if v is not None]
        if not non_null:
            return "any"
        kind = _kind(non_null[0])

        if kind == "object":
            objects = [v for v in non_null if isinstance(v, dict)]
            return self._auxiliary(key, objects)
        if kind == "array":
            elements: list[JsonValue] = []
            for v in non_null:
                if isinstance(v, list):
                    elements.extend(v)
            return self._array_type(key, elements)
        return _TS_KIND[kind]

    def _array_type(self, key: str, elements: list[JsonValue]) -> str:
        if not elements:
            return "any[]"
        kinds = {_kind(e) for e in elements}
        if len(kinds) != 1:
            return "any[]"
        kind = kinds.pop()

        if kind == "object":
            objects = [e for e in elements if isinstance(e, dict)]
            return f"{self._auxiliary(key, objects)}[]"
        if kind == "array":
            nested: list[JsonValue] = []
            for e in elements:
                if isinstance(e, list):
                    nested.extend(e)
            return f"{self._array_type(key, nested)}[]"
        if kind == "null":
            return "any[]"
        return f"{_TS_KIND[kind]}[]"

    def _auxiliary(self, key: str, samples: list[dict[str, JsonValue]]) -> str:
        """Return the interface name for a nested object shape, declaring it if new."""
        fields = self._fields(samples)
        token = fingerprint(render_interface("_", fields))
        existing = self._names_by_fingerprint.get(token)
        if existing is not None:
            return existing

        stem = self.root_name + title_case_join(key, fallback="Field")
        name = stem
        counter = 1
        while name in self._used_names:
            name = f"{stem}{counter}"
            counter += 1
        self._used_names.add(name)
        self._names_by_fingerprint[token] = name
        self._declarations.append(render_interface(name, fields))
        return name
