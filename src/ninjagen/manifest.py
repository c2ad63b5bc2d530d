"""Structured snapshot of a Ninja file declaration, with JSON and CBOR export."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import cbor2

from .errors import ManifestError

SCHEMA_VERSION = 1


@dataclass(frozen=True, slots=True)
class Manifest:
    digest: str
    required_version: str | None = None
    build_dir: str | None = None
    header: str | None = None
    default: str | None = None
    rules: tuple[dict[str, Any], ...] = ()
    edges: tuple[dict[str, Any], ...] = ()
    bindings: tuple[dict[str, Any], ...] = ()
    schema_version: int = field(default=SCHEMA_VERSION)

    def to_json(self, path: str | Path | None = None) -> str:
        encoded = json.dumps(self.to_dict(), indent=2, sort_keys=True) + "\n"
        if path is not None:
            Path(path).write_text(encoded, encoding="utf-8")
        return encoded

    def to_cbor(self, path: str | Path | None = None) -> bytes:
        encoded = cbor2.dumps(self.to_dict(), canonical=True)
        if path is not None:
            Path(path).write_bytes(encoded)
        return encoded

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "schema_version": self.schema_version,
            "digest": self.digest,
            "rules": [dict(rule) for rule in self.rules],
            "edges": [dict(edge) for edge in self.edges],
            "bindings": [dict(binding) for binding in self.bindings],
        }
        for key in ("required_version", "build_dir", "header", "default"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload

    @classmethod
    def from_dict(cls, payload: Any) -> Manifest:
        if not isinstance(payload, dict):
            raise ManifestError("Invalid manifest payload type.")
        schema_version = payload.get("schema_version")
        if schema_version != SCHEMA_VERSION:
            raise ManifestError(
                "Unsupported manifest schema version.",
                hint=f"Regenerate the manifest with schema version {SCHEMA_VERSION}.",
                context={"schema_version": str(schema_version)},
            )
        digest = payload.get("digest")
        if not isinstance(digest, str) or not digest:
            raise ManifestError("Invalid manifest `digest` value.")
        return cls(
            digest=digest,
            required_version=_optional_str(payload, "required_version"),
            build_dir=_optional_str(payload, "build_dir"),
            header=_optional_str(payload, "header"),
            default=_optional_str(payload, "default"),
            rules=_entries(payload, "rules"),
            edges=_entries(payload, "edges"),
            bindings=_entries(payload, "bindings"),
            schema_version=schema_version,
        )

    @classmethod
    def from_json(cls, raw: str) -> Manifest:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ManifestError("Invalid manifest JSON.", hint=str(exc)) from exc
        return cls.from_dict(payload)

    @classmethod
    def from_cbor(cls, raw: bytes) -> Manifest:
        try:
            payload = cbor2.loads(raw)
        except cbor2.CBORDecodeError as exc:
            raise ManifestError("Invalid manifest CBOR.", hint=str(exc)) from exc
        return cls.from_dict(payload)


def _optional_str(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise ManifestError(f"Invalid manifest `{key}` value.")
    return value


def _entries(payload: dict[str, Any], key: str) -> tuple[dict[str, Any], ...]:
    value = payload.get(key, [])
    if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
        raise ManifestError(f"Invalid manifest `{key}` value.")
    return tuple(dict(item) for item in value)
