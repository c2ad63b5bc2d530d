"""Text sinks accepted by the serializers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextSink(Protocol):
    """Anything that accepts sequential string writes, e.g. an open text file."""

    def write(self, text: str, /) -> object:
        """Append ``text`` to the sink."""


@dataclass(slots=True)
class StringSink:
    """In-memory sink that collects writes in order."""

    chunks: list[str] = field(default_factory=list)

    def write(self, text: str, /) -> int:
        self.chunks.append(text)
        return len(text)

    def getvalue(self) -> str:
        return "".join(self.chunks)
