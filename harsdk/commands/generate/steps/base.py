"""Base class shared by the generation steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

In = TypeVar("In")
Out = TypeVar("Out")


class StepValidationError(Exception):
    """A step produced output that breaks one of its guarantees."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


class Step(ABC, Generic[In, Out]):
    """One synchronous stage of SDK generation, typed by its input and output.

    Subclasses implement ``_execute``; ``_validate_output`` checks the result
    and is a no-op unless overridden.  A failed check is fatal: steps are
    deterministic, so running them again would fail the same way.
    """

    name: str = "step"

    @abstractmethod
    def _execute(self, input: In) -> Out: ...

    def _validate_output(self, output: Out) -> None:
        """Raise StepValidationError when *output* is inconsistent."""

    def run(self, input: In) -> Out:
        output = self._execute(input)
        self._validate_output(output)
        return output
