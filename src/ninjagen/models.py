"""Builders for the statements of a Ninja file: bindings, rules, and edges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Self

from .sinks import TextSink

PHONY_RULE = "phony"

Scalar = str | int
Names = str | Sequence[str]


def _as_list(names: Names) -> list[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


@dataclass(frozen=True, slots=True)
class AssignBuilder:
    """A ``name = value`` variable binding."""

    name: Scalar
    value: Scalar

    def write(self, stream: TextSink) -> None:
        stream.write(f"{self.name} = {self.value}\n")

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}


@dataclass(slots=True)
class RuleBuilder:
    """A named rule: how to build a file of one kind from another."""

    name: str
    command: str = ""
    desc: str | None = None
    dependency_file: str | None = None
    do_restat: bool | None = None
    is_generator: bool | None = None
    pool_name: str | None = None

    def run(self, command: str) -> Self:
        """Set the command line executed by the rule."""
        self.command = command
        return self

    def description(self, desc: str) -> Self:
        """Set the text Ninja prints instead of the bare command line."""
        self.desc = desc
        return self

    def depfile(self, file: str) -> Self:
        """Set a Makefile-compatible dependency file for the rule products."""
        self.dependency_file = file
        return self

    def restat(self, do_restat: bool) -> Self:
        self.do_restat = do_restat
        return self

    def generator(self, is_generator: bool) -> Self:
        self.is_generator = is_generator
        return self

    def pool(self, pool: str) -> Self:
        self.pool_name = pool
        return self

    def write(self, stream: TextSink) -> None:
        stream.write(f"rule {self.name}\n  command = {self.command}\n")
        if self.desc is not None:
            stream.write(f"  description = {self.desc}\n")
        if self.do_restat:
            stream.write("  restat = 1\n")
        if self.is_generator:
            stream.write("  generator = 1\n")
        if self.pool_name is not None:
            stream.write(f"  pool = {self.pool_name}\n")
        if self.dependency_file is not None:
            stream.write(f"  depfile = {self.dependency_file}\n")
            stream.write("  deps = gcc\n")

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "command": self.command}
        if self.desc is not None:
            payload["description"] = self.desc
        if self.do_restat is not None:
            payload["restat"] = self.do_restat
        if self.is_generator is not None:
            payload["generator"] = self.is_generator
        if self.pool_name is not None:
            payload["pool"] = self.pool_name
        if self.dependency_file is not None:
            payload["depfile"] = self.dependency_file
        return payload


@dataclass(slots=True, init=False)
class EdgeBuilder:
    """A build edge: how to produce ``targets`` from inputs with a rule."""

    targets: list[str]
    rule: str = PHONY_RULE
    sources: list[str] | None = None
    dependencies: list[str] | None = None
    order_deps: list[str] | None = None
    assigns: dict[str, Scalar] = field(default_factory=dict)
    pool_name: str | None = None

    def __init__(self, targets: Names) -> None:
        self.targets = _as_list(targets)
        self.rule = PHONY_RULE
        self.sources = None
        self.dependencies = None
        self.order_deps = None
        self.assigns = {}
        self.pool_name = None

    def using(self, rule: str) -> Self:
        """Set the rule used to build this edge."""
        self.rule = rule
        return self

    def from_(self, sources: Names) -> Self:
        """Append direct inputs, the files transformed by the rule."""
        if self.sources is None:
            self.sources = []
        self.sources.extend(_as_list(sources))
        return self

    def need(self, dependencies: Names) -> Self:
        """Append implicit inputs: needed, but not passed to the rule as ``$in``."""
        if self.dependencies is None:
            self.dependencies = []
        self.dependencies.extend(_as_list(dependencies))
        return self

    def after(self, order_deps: Names) -> Self:
        """Append order-only inputs, built before this edge without triggering it."""
        if self.order_deps is None:
            self.order_deps = []
        self.order_deps.extend(_as_list(order_deps))
        return self

    def assign(self, name: Scalar, value: Scalar) -> Self:
        """Bind ``name`` to ``value`` for this edge only."""
        self.assigns[str(name)] = value
        return self

    def pool(self, pool: str) -> Self:
        # https://ninja-build.org/manual.html#ref_pool
        self.pool_name = pool
        return self

    def write(self, stream: TextSink) -> None:
        stream.write(f"build {' '.join(self.targets)}: {self.rule}")
        # Lists that were touched but left empty render like untouched ones.
        if self.sources:
            stream.write(" " + " ".join(self.sources))
        if self.dependencies:
            stream.write(" | " + " ".join(self.dependencies))
        if self.order_deps:
            stream.write(" || " + " ".join(self.order_deps))
        for name, value in self.assigns.items():
            stream.write(f"\n  {name} = {value}")
        stream.write("\n")
        if self.pool_name is not None:
            stream.write(f"  pool = {self.pool_name}\n")

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"targets": list(self.targets), "rule": self.rule}
        if self.sources is not None:
            payload["sources"] = list(self.sources)
        if self.dependencies is not None:
            payload["dependencies"] = list(self.dependencies)
        if self.order_deps is not None:
            payload["order_deps"] = list(self.order_deps)
        if self.assigns:
            payload["assigns"] = dict(self.assigns)
        if self.pool_name is not None:
            payload["pool"] = self.pool_name
        return payload
