"""Per-run state of an SDK generation."""

from __future__ import annotations

from dataclasses import dataclass, field

from harsdk.commands.generate.registry import TypeRegistry
from harsdk.config import GeneratorOptions
from harsdk.helpers.naming import IdentifierRegistry


@dataclass
class GenerationContext:
    """Registries shared by every step of one run.

    Built fresh for each generation and passed explicitly to the steps that
    name or register things; nothing is kept at module level.  The
    registries enforce first-writer-wins uniqueness, so a context must not be
    shared between runs without ``reset()``.
    """

    options: GeneratorOptions = field(default_factory=GeneratorOptions)
    identifiers: IdentifierRegistry = field(default_factory=IdentifierRegistry)
    function_names: IdentifierRegistry = field(default_factory=IdentifierRegistry)
    types: TypeRegistry = field(init=False)

    def __post_init__(self) -> None:
        self.types = TypeRegistry(merge_types=self.options.merge_types)

    def reset(self) -> None:
        """Clear every registry (the start of every run)."""
        self.identifiers.clear()
        self.function_names.clear()
        self.types.clear()
