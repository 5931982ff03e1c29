"""Values handed from one generation step to the next.

Grouping produces EndpointGroup lists; assembly turns them into an SdkResult
that the TypeScript emitter renders as is.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from harsdk.commands.generate.registry import TypeDefinition
from harsdk.formats.har import HarEntry, HarHeader


# -- Endpoint grouping -------------------------------------------------------


@dataclass
class EndpointGroup:
    """Capture entries sharing an HTTP method and a resource name."""

    method: str
    resource: str
    entries: list[HarEntry] = field(default_factory=lambda: list[HarEntry]())

    @property
    def key(self) -> str:
        return f"{self.method}_{self.resource}"


# -- Assembly output ---------------------------------------------------------


@dataclass
class EndpointBinding:
    """One callable endpoint of the generated SDK, with resolved type names."""

    function_name: str
    method: str
    origin: str
    path: str
    params_type: str
    body_type: str
    response_type: str
    headers: list[HarHeader] = field(default_factory=lambda: list[HarHeader]())

    @property
    def has_body(self) -> bool:
        return self.body_type != "undefined"


@dataclass
class SdkResult:
    """Everything the emitter needs: types in emission order, then bindings."""

    types: list[TypeDefinition] = field(default_factory=lambda: list[TypeDefinition]())
    bindings: list[EndpointBinding] = field(
        default_factory=lambda: list[EndpointBinding]()
    )
