"""TypeScript codegen naming utilities shared across the generator."""

from __future__ import annotations

import re

_NOISE_PREFIX = re.compile(r"^(ep\.|epn\.|_)")
_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_]")


def safe_name(name: str, *, fallback: str = "field") -> str:
    """Sanitize a string to a valid identifier.

    Every character outside ``[A-Za-z0-9_]`` becomes ``_``; a leading digit
    gets an ``_`` prefix.  Returns *fallback* if the result is empty.
    """
    name = _INVALID_CHARS.sub("_", name)
    if not name:
        return fallback
    if name[0].isdigit():
        name = "_" + name
    return name


def to_identifier(name: str, *, fallback: str = "unknown") -> str:
    """Clean a name into a valid identifier (snake_case).

    Strips non-alphanumeric chars, collapses underscores, strips leading/trailing.
    Returns *fallback* if the result is empty.
    """
    name = _INVALID_CHARS.sub("_", name)
    name = re.sub(r"_+", "_", name).strip("_")
    return name or fallback


def title_case_join(segment: str, *, fallback: str = "Root") -> str:
    """Convert a URL segment to a PascalCase type-name stem.

    ``"user-profiles"`` → ``"UserProfiles"``.  A stem that would start with a
    digit is prefixed with ``T``; *fallback* is returned when nothing
    alphanumeric is left.
    """
    words = re.split(r"[^a-zA-Z0-9]+", segment)
    stem = "".join(w.capitalize() for w in words if w)
    if not stem:
        return fallback
    if stem[0].isdigit():
        stem = "T" + stem
    return stem


class IdentifierRegistry:
    """Run-scoped mapping from raw source names to unique identifiers.

    The mapping is injective: two distinct raw names never share an
    identifier.  It is also stable: once a raw name has an identifier, every
    later lookup of that exact raw name returns it unchanged.
    """

    def __init__(self) -> None:
        self._assigned: dict[str, str] = {}
        self._taken: set[str] = set()

    def __len__(self) -> int:
        return len(self._assigned)

    def __contains__(self, raw_name: object) -> bool:
        return raw_name in self._assigned

    def normalize(self, raw_name: str) -> str:
        """Return the identifier for a JSON key, form field or query parameter.

        Strips one tracking prefix (``ep.``, ``epn.`` or a leading ``_``),
        sanitizes the rest with ``safe_name`` and suffixes ``_1``, ``_2``, …
        when the base is already used by another raw name.
        """
        if raw_name in self._assigned:
            return self._assigned[raw_name]
        base = safe_name(_NOISE_PREFIX.sub("", raw_name, count=1))
        return self.assign(raw_name, base)

    def assign(self, raw_name: str, base: str) -> str:
        """Bind *raw_name* to *base*, or to the first free ``base_N``."""
        if raw_name in self._assigned:
            return self._assigned[raw_name]
        unique = base
        counter = 1
        while unique in self._taken:
            unique = f"{base}_{counter}"
            counter += 1
        self._assigned[raw_name] = unique
        self._taken.add(unique)
        return unique

    def clear(self) -> None:
        self._assigned.clear()
        self._taken.clear()
