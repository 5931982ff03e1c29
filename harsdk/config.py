"""Generator options and their YAML config file."""

from __future__ import annotations

from pathlib import Path
import re
from typing import Any

from pydantic import BaseModel, field_validator
import yaml

_PREFIX_PATTERN = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)?$")


class GeneratorOptions(BaseModel):
    """Options of one SDK generation run."""

    merge_types: bool = True
    type_prefix: str = ""
    skip_validation: bool = False

    @field_validator("type_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not _PREFIX_PATTERN.match(value):
            raise ValueError(f"type_prefix must be a valid identifier prefix, got {value!r}")
        return value


def load_options(
    config_path: str | Path | None = None, **overrides: Any
) -> GeneratorOptions:
    """Build options from an optional YAML file, then *overrides*.

    Overrides set to ``None`` are ignored so unset CLI flags keep the file's
    (or the default) value.
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        loaded = yaml.safe_load(Path(config_path).read_text())
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        data.update(loaded)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return GeneratorOptions.model_validate(data)
