"""Generator configuration and its validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from .errors import ConfigError


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Preamble and persistence settings applied to a new builder."""

    required_version: str | None = None
    build_dir: str | None = None
    header: str | None = None
    default: str | None = None
    only_if_changed: bool = False


def config_from_mapping(payload: Mapping[str, Any]) -> GeneratorConfig:
    """Build a config from a plain mapping, e.g. a ``[tool.ninjagen]`` table."""
    if not isinstance(payload, Mapping):
        raise ConfigError("Generator config must be a mapping.")

    known = {item.name for item in fields(GeneratorConfig)}
    unknown = sorted(str(key) for key in payload if key not in known)
    if unknown:
        raise ConfigError(
            "Unknown generator config keys.",
            hint=f"Supported keys: {', '.join(sorted(known))}.",
            context={"keys": ", ".join(unknown)},
        )

    return GeneratorConfig(
        required_version=_optional_str(payload, "required_version"),
        build_dir=_optional_str(payload, "build_dir"),
        header=_optional_str(payload, "header"),
        default=_optional_str(payload, "default"),
        only_if_changed=_optional_bool(payload, "only_if_changed", fallback=False),
    )


def _optional_str(payload: Mapping[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"Invalid generator config `{key}` value.", context={"key": key})
    return value


def _optional_bool(payload: Mapping[str, Any], key: str, *, fallback: bool) -> bool:
    value = payload.get(key, fallback)
    if not isinstance(value, bool):
        raise ConfigError(f"Invalid generator config `{key}` value.", context={"key": key})
    return value
