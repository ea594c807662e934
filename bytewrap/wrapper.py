from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from typing import Any

from .constants import DEFAULT_LINE_TERMINATOR
from .errors import GraphemeClusterTooLargeError
from .split_config import SplitConfig
from .stages.protocols import GraphemeSource, LineSplitter
from .stages.splitters.grapheme import GraphemeLineSplitter
from .types import Line, Trace

logger = logging.getLogger(__name__)

__all__ = [
    "ByteWrapper",
    "iter_lines",
    "iter_split",
    "join_lines",
    "split",
    "wrap",
]


def join_lines(lines: Iterable[str], separator: str = DEFAULT_LINE_TERMINATOR) -> str:
    return separator.join(lines)


class ByteWrapper:
    """Split or wrap text on a byte budget with a fixed configuration.

    Example:
        >>> wrapper = ByteWrapper(SplitConfig(byte_limit=10))
        >>> wrapper.split("Hello world this is a test")
        ['Hello ', 'world ', 'this is a ', 'test']
        >>> wrapper.wrap("Short")
        'Short'
    """

    def __init__(
        self,
        config: SplitConfig,
        *,
        graphemes: GraphemeSource | None = None,
        splitter: LineSplitter | None = None,
    ) -> None:
        self.config = config
        self.splitter = splitter or GraphemeLineSplitter(graphemes=graphemes)

    def _resolve(self, overrides: dict[str, Any]) -> SplitConfig:
        cfg = replace(self.config, **overrides) if overrides else self.config
        cfg.require_limit()
        return cfg

    def iter_lines(
        self, text: str, trace: Trace | None = None, **overrides: Any
    ) -> Iterator[Line]:
        """Lazily yield lines; the scan advances only as lines are requested."""
        cfg = self._resolve(overrides)
        return self.splitter.split(text, cfg, trace)

    def split(self, text: str, **overrides: Any) -> list[str]:
        """Split ``text`` eagerly.

        Raises:
            GraphemeClusterTooLargeError: a cluster does not fit the byte
                limit and ``continue_on_error`` is off. Nothing is returned
                in that case.
        """
        cfg = self._resolve(overrides)
        lines: list[str] = []
        for line in self.splitter.split(text, cfg):
            if line.error is not None and not cfg.continue_on_error:
                logger.debug("Split failed at line %d: %s", line.index, line.error)
                raise line.error
            lines.append(line.text)
        return lines

    def wrap(
        self,
        text: str,
        line_terminator: str = DEFAULT_LINE_TERMINATOR,
        **overrides: Any,
    ) -> str:
        return join_lines(self.split(text, **overrides), line_terminator)

    def __call__(self, text: str, **overrides: Any) -> list[str]:
        return self.split(text, **overrides)


def _config(byte_limit: int, config: SplitConfig | None) -> SplitConfig:
    if config is None:
        return SplitConfig(byte_limit=byte_limit)
    return replace(config, byte_limit=byte_limit)


def split(text: str, byte_limit: int, config: SplitConfig | None = None) -> list[str]:
    """Split ``text`` into lines of at most ``byte_limit`` encoded bytes.

    Lines break after whitespace when possible, otherwise between grapheme
    clusters; a cluster is never divided unless ``break_grapheme_clusters``
    is set.

    Raises:
        GraphemeClusterTooLargeError: if a single cluster is larger than
            ``byte_limit`` (unless ``continue_on_error`` is set).
    """
    return ByteWrapper(_config(byte_limit, config)).split(text)


def iter_lines(
    text: str,
    byte_limit: int,
    config: SplitConfig | None = None,
    *,
    trace: Trace | None = None,
) -> Iterator[Line]:
    return ByteWrapper(_config(byte_limit, config)).iter_lines(text, trace)


def iter_split(
    text: str,
    byte_limit: int,
    config: SplitConfig | None = None,
    *,
    trace: Trace | None = None,
) -> Iterator[tuple[str, GraphemeClusterTooLargeError | None]]:
    """Yield ``(line, error)`` pairs; ``error`` is None for lines that fit.

    With ``continue_on_error`` off the sequence ends after the first
    oversized line.
    """
    for line in iter_lines(text, byte_limit, config, trace=trace):
        yield line.text, line.error


def wrap(
    text: str,
    byte_limit: int,
    config: SplitConfig | None = None,
    *,
    line_terminator: str = DEFAULT_LINE_TERMINATOR,
) -> str:
    """Split as with :func:`split` and join the lines with ``line_terminator``."""
    return ByteWrapper(_config(byte_limit, config)).wrap(text, line_terminator)
