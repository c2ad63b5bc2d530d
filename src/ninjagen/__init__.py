"""Public package entrypoint for the Ninja file generator."""

from .builder import NinjaBuilder, ninja_builder
from .config import GeneratorConfig, config_from_mapping
from .errors import (
    ConfigError,
    ErrorCode,
    ManifestError,
    NinjaGenError,
    ValidationError,
)
from .escape import escape
from .manifest import Manifest
from .models import PHONY_RULE, AssignBuilder, EdgeBuilder, RuleBuilder
from .observability import StructuredLogger
from .sinks import StringSink, TextSink

__all__ = [
    "AssignBuilder",
    "ConfigError",
    "EdgeBuilder",
    "ErrorCode",
    "GeneratorConfig",
    "Manifest",
    "ManifestError",
    "NinjaBuilder",
    "NinjaGenError",
    "PHONY_RULE",
    "RuleBuilder",
    "StringSink",
    "StructuredLogger",
    "TextSink",
    "ValidationError",
    "config_from_mapping",
    "escape",
    "ninja_builder",
]
