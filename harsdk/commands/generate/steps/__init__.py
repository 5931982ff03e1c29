"""Pipeline steps for the SDK generator."""

from __future__ import annotations

from harsdk.commands.generate.steps.base import (
    Step as Step,
    StepValidationError as StepValidationError,
)

__all__ = [
    "Step",
    "StepValidationError",
]
