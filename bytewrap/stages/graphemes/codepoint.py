from __future__ import annotations

from collections.abc import Iterator


class CodepointSource:
    """Treat every scalar value as its own cluster.

    Used to bisect clusters that cannot fit on a line; never cuts inside an
    encoded scalar value.
    """

    def clusters(self, text: str) -> Iterator[str]:
        yield from text
