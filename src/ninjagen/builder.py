"""Top-level builder assembling a complete Ninja file."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from .config import GeneratorConfig
from .errors import ValidationError
from .manifest import Manifest
from .models import AssignBuilder, EdgeBuilder, Names, RuleBuilder, Scalar
from .observability import StructuredLogger
from .sinks import StringSink, TextSink


@dataclass(slots=True)
class NinjaBuilder:
    """Declares rules, edges, and bindings, then writes them as a Ninja file.

    ``version`` becomes ``ninja_required_version``; ``build_dir`` is where
    Ninja keeps its logs and where intermediate products may go.
    """

    version: str | None = None
    build_dir: str | None = None
    logger: StructuredLogger = field(default_factory=StructuredLogger)
    only_if_changed: bool = False
    _rules: list[RuleBuilder] = field(init=False, default_factory=list, repr=False)
    _edges: list[EdgeBuilder] = field(init=False, default_factory=list, repr=False)
    _variables: list[AssignBuilder] = field(init=False, default_factory=list, repr=False)
    _rule_count: int = field(init=False, default=0, repr=False)
    _edge_count: int = field(init=False, default=0, repr=False)
    _header: str | None = field(init=False, default=None, repr=False)
    _default: str | None = field(init=False, default=None, repr=False)

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        *,
        logger: StructuredLogger | None = None,
    ) -> Self:
        builder = cls(
            version=config.required_version,
            build_dir=config.build_dir,
            logger=logger or StructuredLogger(),
            only_if_changed=config.only_if_changed,
        )
        if config.header is not None:
            builder.header(config.header)
        if config.default is not None:
            builder.by_default(config.default)
        return builder

    @property
    def rule_count(self) -> int:
        return self._rule_count

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def header(self, value: str) -> Self:
        """Set an arbitrary header written verbatim before everything else."""
        self._header = value
        return self

    def by_default(self, name: str) -> Self:
        """Set the target built when Ninja is run without arguments."""
        self._default = name
        return self

    def assign(self, name: Scalar, value: Scalar) -> AssignBuilder:
        clause = AssignBuilder(name, value)
        self._variables.append(clause)
        return clause

    def rule(self, name: str) -> RuleBuilder:
        clause = RuleBuilder(name)
        self._rules.append(clause)
        self._rule_count += 1
        return clause

    def edge(self, targets: Names) -> EdgeBuilder:
        clause = EdgeBuilder(targets)
        if not clause.targets:
            raise ValidationError(
                "edge() requires at least one target.",
                hint="Pass a target name or a non-empty list of names.",
                context={"operation": "edge"},
            )
        self._edges.append(clause)
        self._edge_count += 1
        return clause

    def save_to_stream(self, stream: TextSink) -> None:
        """Write the whole file to ``stream``. The stream is left open."""
        if self._header is not None:
            stream.write(self._header + "\n\n")
        if self.version is not None:
            stream.write(f"ninja_required_version = {self.version}\n")
        if self.build_dir is not None:
            stream.write(f"builddir={self.build_dir}\n")
        for rule in self._rules:
            rule.write(stream)
        for edge in self._edges:
            edge.write(stream)
        for variable in self._variables:
            variable.write(stream)
        if self._default is not None:
            stream.write(f"default {self._default}\n")

    def render(self) -> str:
        sink = StringSink()
        self.save_to_stream(sink)
        return sink.getvalue()

    def digest(self) -> str:
        return hashlib.sha256(self.render().encode("utf-8")).hexdigest()

    def save(
        self,
        path: str | Path,
        callback: Callable[[], None] | None = None,
        *,
        only_if_changed: bool | None = None,
    ) -> Path:
        """Write the file to ``path``, then call ``callback`` once it is closed.

        With ``only_if_changed`` an existing file holding the same text is left
        untouched so its mtime does not trigger a regeneration loop.
        """
        output_path = Path(path)
        skip_identical = self.only_if_changed if only_if_changed is None else only_if_changed
        if skip_identical and self._matches_existing(output_path):
            self.logger.log(
                operation="save_skipped",
                path=str(output_path),
                message="Existing file is up to date.",
            )
        else:
            with output_path.open("w", encoding="utf-8", newline="") as stream:
                self.save_to_stream(stream)
            self.logger.log(
                operation="save",
                path=str(output_path),
                message="Wrote Ninja file.",
                extra={"rules": self._rule_count, "edges": self._edge_count},
            )
        if callback is not None:
            callback()
        return output_path

    def manifest(self) -> Manifest:
        return Manifest(
            digest=self.digest(),
            required_version=self.version,
            build_dir=self.build_dir,
            header=self._header,
            default=self._default,
            rules=tuple(rule.to_dict() for rule in self._rules),
            edges=tuple(edge.to_dict() for edge in self._edges),
            bindings=tuple(variable.to_dict() for variable in self._variables),
        )

    def _matches_existing(self, path: Path) -> bool:
        if not path.is_file():
            return False
        return path.read_bytes() == self.render().encode("utf-8")


def ninja_builder(version: str | None = None, build_dir: str | None = None) -> NinjaBuilder:
    """Create a builder for a Ninja file."""
    return NinjaBuilder(version=version, build_dir=build_dir)
