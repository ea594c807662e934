"""Grapheme-aware line splitting on a byte budget.

The splitter walks the grapheme clusters of the input once, accumulating
them in a working line. When the working line reaches the byte limit it is
cut at the most recent whitespace cluster if there is one, otherwise just
before the newest cluster. Clusters are never cut; a cluster that alone
exceeds the limit is either reported as an oversized line or, when
``break_grapheme_clusters`` is set, decomposed into scalar values.

Every line boundary lies on a cluster (or, when bisecting, scalar) boundary
and the untrimmed lines concatenate back to the input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...constants import NON_BREAKING_CONTROLS, TRAILING_WHITESPACE
from ...errors import GraphemeClusterTooLargeError
from ...types import Line, LineStatus, Trace, TraceKind
from ..graphemes.codepoint import CodepointSource
from ..graphemes.uax29 import RegexGraphemeSource
from ..protocols import GraphemeSource

if TYPE_CHECKING:
    from ...split_config import SplitConfig

logger = logging.getLogger(__name__)

__all__ = ["GraphemeLineSplitter"]


def _is_space(unit: str) -> bool:
    first = unit[0]
    return first.isspace() and first not in NON_BREAKING_CONTROLS


@dataclass
class _WorkingLine:
    pieces: list[str] = field(default_factory=list)
    sizes: list[int] = field(default_factory=list)
    size: int = 0
    # Number of leading pieces to keep when breaking after the last whitespace
    space_cut: int | None = None
    # Number of leading pieces before the most recently appended one
    safe_cut: int | None = None
    index: int = 0
    byte_start: int = 0

    def __bool__(self) -> bool:
        return bool(self.pieces)

    def append(self, piece: str, size: int, is_space: bool) -> None:
        self.safe_cut = len(self.pieces) or None
        self.pieces.append(piece)
        self.sizes.append(size)
        self.size += size
        if is_space:
            self.space_cut = len(self.pieces)

    def prefix_size(self, n: int) -> int:
        return sum(self.sizes[:n])

    def take(self, n: int) -> tuple[str, int, int]:
        """Remove the first ``n`` pieces; return text and byte span."""
        text = "".join(self.pieces[:n])
        nbytes = self.prefix_size(n)
        start = self.byte_start
        del self.pieces[:n]
        del self.sizes[:n]
        self.size -= nbytes
        self.byte_start += nbytes
        self.index += 1
        self.space_cut = None
        self.safe_cut = len(self.pieces) - 1 if len(self.pieces) > 1 else None
        return text, start, start + nbytes


class GraphemeLineSplitter:
    def __init__(
        self,
        graphemes: GraphemeSource | None = None,
        scalars: GraphemeSource | None = None,
    ) -> None:
        self.graphemes = graphemes or RegexGraphemeSource()
        self.scalars = scalars or CodepointSource()

    def split(
        self, text: str, cfg: SplitConfig, trace: Trace | None = None
    ) -> Iterator[Line]:
        limit = cfg.require_limit()
        working = _WorkingLine()

        for cluster in self.graphemes.clusters(text):
            size = cfg.byte_length(cluster)
            if size > limit and cfg.break_grapheme_clusters:
                units = [
                    (s, cfg.byte_length(s)) for s in self.scalars.clusters(cluster)
                ]
                logger.debug(
                    "Bisecting %d-byte cluster into %d scalar values", size, len(units)
                )
                if trace is not None:
                    trace.record(
                        "bisect", working.index, cluster_bytes=size, scalars=len(units)
                    )
            else:
                units = [(cluster, size)]

            for unit, unit_size in units:
                if unit_size > limit:
                    if working:
                        yield self._emit(
                            cfg, working, len(working.pieces), "flush", trace
                        )
                    yield self._emit_oversized(cfg, working, unit, unit_size, trace)
                    if not cfg.continue_on_error:
                        logger.debug(
                            "Stopping at oversized cluster of %d bytes", unit_size
                        )
                        return
                    continue

                working.append(unit, unit_size, _is_space(unit))
                while working and working.size >= limit:
                    cut = self._choose_cut(working, limit)
                    if cut is None:
                        # Only a lone piece above the limit lands here, and
                        # those are caught before being appended.
                        yield self._emit_oversized(cfg, working, "", 0, trace)
                        if not cfg.continue_on_error:
                            return
                        break
                    n, kind = cut
                    yield self._emit(cfg, working, n, kind, trace)

        if working:
            status: LineStatus = "ok"
            error = None
            if working.size > limit:
                status = "oversized_cluster"
                error = GraphemeClusterTooLargeError(
                    "".join(working.pieces), working.size, limit, working.byte_start
                )
            yield self._emit(
                cfg, working, len(working.pieces), "final", trace, status, error
            )

    @staticmethod
    def _choose_cut(
        working: _WorkingLine, limit: int
    ) -> tuple[int, TraceKind] | None:
        space_cut = working.space_cut
        if space_cut is not None and working.prefix_size(space_cut) <= limit:
            return space_cut, "space_break"
        if working.size == limit:
            return len(working.pieces), "exact_fit"
        if working.safe_cut:
            return working.safe_cut, "safe_break"
        return None

    def _emit_oversized(
        self,
        cfg: SplitConfig,
        working: _WorkingLine,
        unit: str,
        unit_size: int,
        trace: Trace | None,
    ) -> Line:
        limit = cfg.require_limit()
        if unit:
            working.append(unit, unit_size, _is_space(unit))
        error = GraphemeClusterTooLargeError(
            "".join(working.pieces), working.size, limit, working.byte_start
        )
        if cfg.continue_on_error:
            message = (
                f"Line {working.index}: grapheme cluster of {error.cluster_size} "
                f"bytes exceeds byte limit {limit}, emitted on its own line"
            )
            logger.warning(message)
            if trace is not None:
                trace.warnings.append(message)
        return self._emit(
            cfg,
            working,
            len(working.pieces),
            "oversized",
            trace,
            "oversized_cluster",
            error,
        )

    @staticmethod
    def _emit(
        cfg: SplitConfig,
        working: _WorkingLine,
        n: int,
        kind: TraceKind,
        trace: Trace | None,
        status: LineStatus = "ok",
        error: GraphemeClusterTooLargeError | None = None,
    ) -> Line:
        index = working.index
        text, start, end = working.take(n)
        if cfg.trim_trailing_whitespace:
            text = text.rstrip(TRAILING_WHITESPACE)
        logger.debug("Line %d: %s, %d bytes", index, kind, end - start)
        if trace is not None:
            trace.record(kind, index, bytes=end - start)
        return Line(
            index=index,
            text=text,
            byte_start=start,
            byte_end=end,
            status=status,
            error=error,
        )
