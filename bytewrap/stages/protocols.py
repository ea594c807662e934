from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

from ..types import Line, Trace

if TYPE_CHECKING:
    from ..split_config import SplitConfig


class GraphemeSource(Protocol):
    def clusters(self, text: str) -> Iterator[str]:
        """Yield the user-perceived characters of ``text`` in order.

        The yielded strings are non-empty and concatenate back to ``text``.
        """
        ...


class LineSplitter(Protocol):
    def split(
        self, text: str, cfg: SplitConfig, trace: Trace | None = None
    ) -> Iterator[Line]: ...
