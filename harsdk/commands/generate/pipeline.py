"""Orchestrator for SDK generation.

Groups the capture into endpoints, then assembles types and bindings.
Everything runs sequentially against one GenerationContext.
"""

from __future__ import annotations

from collections.abc import Callable

from harsdk.commands.generate.context import GenerationContext
from harsdk.commands.generate.steps.assemble import AssembleStep
from harsdk.commands.generate.steps.group_endpoints import GroupEndpointsStep
from harsdk.commands.generate.steps.types import SdkResult
from harsdk.config import GeneratorOptions
from harsdk.formats.har import HarFile


def generate_sdk(
    har: HarFile,
    options: GeneratorOptions | None = None,
    *,
    context: GenerationContext | None = None,
    on_progress: Callable[[str], None] | None = None,
) -> SdkResult:
    """Build the SDK types and endpoint bindings of a capture.

    A fresh GenerationContext is created from *options* unless *context* is
    given, in which case it is reset and its own options apply.
    """

    def progress(msg: str) -> None:
        if on_progress:
            on_progress(msg)

    if context is None:
        context = GenerationContext(options=options or GeneratorOptions())
    else:
        context.reset()

    entries = list(har.log.entries)

    group_step = GroupEndpointsStep()
    groups = group_step.run(entries)
    kept = sum(len(g.entries) for g in groups)
    progress(f"Grouped {kept}/{len(entries)} entries into {len(groups)} endpoints")

    assemble_step = AssembleStep(context)
    result = assemble_step.run(groups)
    progress(f"Inferred {len(result.types)} types, {len(result.bindings)} functions")

    return result
