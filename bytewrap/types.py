from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .errors import GraphemeClusterTooLargeError

LineStatus = Literal["ok", "oversized_cluster"]
TraceKind = Literal[
    "space_break",
    "safe_break",
    "exact_fit",
    "flush",
    "final",
    "oversized",
    "bisect",
]


@dataclass(frozen=True)
class Line:
    """One emitted line with byte offsets into the *encoded* input.

    ``byte_start``/``byte_end`` describe the line before trimming, so the
    spans of consecutive lines always tile the input.
    """

    index: int
    text: str
    byte_start: int
    byte_end: int
    status: LineStatus = "ok"
    error: GraphemeClusterTooLargeError | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def byte_length(self) -> int:
        return self.byte_end - self.byte_start


@dataclass(frozen=True)
class TraceEvent:
    kind: TraceKind
    line_index: int
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def record(self, kind: TraceKind, line_index: int, **details: Any) -> None:
        self.events.append(
            TraceEvent(kind=kind, line_index=line_index, details=details)
        )

    def kinds(self) -> list[str]:
        return [event.kind for event in self.events]
