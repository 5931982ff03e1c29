"""Run-scoped store of emitted type definitions, keyed by fingerprint."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from harsdk.commands.generate.fingerprint import declared_names, fingerprint


@dataclass(frozen=True)
class TypeDefinition:
    """A named structural type, as emitted to the generated SDK."""

    name: str
    definition: str
    fingerprint: str


class TypeRegistry:
    """Decides whether an inferred definition is new or reuses an earlier one.

    With *merge_types* on, the first definition registered for a fingerprint
    wins and every later definition with the same fingerprint resolves to its
    name.  With it off, every registration is a new entry.
    """

    def __init__(self, merge_types: bool = True) -> None:
        self.merge_types = merge_types
        self._entries: list[TypeDefinition] = []
        self._by_fingerprint: dict[str, TypeDefinition] = {}
        self._names: set[str] = set()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TypeDefinition]:
        return iter(self._entries)

    def available_name(self, stem: str) -> str:
        """Return *stem*, or *stem* with the smallest free numeric suffix.

        A name is taken once any registered definition declares it, auxiliary
        interfaces included.
        """
        if stem not in self._names:
            return stem
        counter = 1
        while f"{stem}{counter}" in self._names:
            counter += 1
        return f"{stem}{counter}"

    def register(self, candidate_name: str, definition: str) -> tuple[str, bool]:
        """Register *definition* under *candidate_name*.

        Returns ``(name, True)`` when the definition is new and must be emitted,
        or ``(existing_name, False)`` when an entry with the same fingerprint
        exists and merging is on; callers then reference ``existing_name``.
        """
        token = fingerprint(definition)
        existing = self._by_fingerprint.get(token)
        if existing is not None and self.merge_types:
            return existing.name, False

        if candidate_name in self._names:
            raise ValueError(f"Type name already registered: {candidate_name}")

        entry = TypeDefinition(name=candidate_name, definition=definition, fingerprint=token)
        self._entries.append(entry)
        self._by_fingerprint.setdefault(token, entry)
        self._names.add(candidate_name)
        self._names.update(declared_names(definition))
        return candidate_name, True

    def clear(self) -> None:
        self._entries.clear()
        self._by_fingerprint.clear()
        self._names.clear()
