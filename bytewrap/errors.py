from __future__ import annotations


class BytewrapError(Exception):
    """Base class for errors raised by bytewrap."""


class GraphemeClusterTooLargeError(BytewrapError, ValueError):
    """A grapheme cluster is larger than the byte limit.

    Raised (or attached to the emitted line) when a single user-perceived
    character - an emoji with modifiers, a letter with combining marks, a
    ZWJ sequence - needs more bytes than one line may hold, so it cannot be
    placed without either bisecting it or exceeding the limit.
    """

    def __init__(
        self,
        cluster: str,
        cluster_size: int,
        byte_limit: int,
        byte_offset: int | None = None,
    ) -> None:
        self.cluster = cluster
        self.cluster_size = cluster_size
        self.byte_limit = byte_limit
        self.byte_offset = byte_offset
        where = f" at byte {byte_offset}" if byte_offset is not None else ""
        super().__init__(
            f"grapheme cluster exceeds byte limit: {cluster!r} is "
            f"{cluster_size} bytes, limit is {byte_limit}{where}"
        )
