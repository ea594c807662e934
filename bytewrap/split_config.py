from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SplitConfig:
    """User-facing configuration for one splitting call.

    Keep this frozen+hashable so a single instance can be shared between
    concurrent callers.
    """

    byte_limit: int | None = None

    # Behavior toggles
    continue_on_error: bool = False
    break_grapheme_clusters: bool = False
    trim_trailing_whitespace: bool = False

    # Byte accounting
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.byte_limit is not None:
            if isinstance(self.byte_limit, bool) or not isinstance(
                self.byte_limit, int
            ):
                raise ValueError(
                    f"byte_limit must be an int, got {type(self.byte_limit).__name__}"
                )
            if self.byte_limit < 0:
                raise ValueError(f"byte_limit must be >= 0, got {self.byte_limit}")
        try:
            bom = "".encode(self.encoding)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from exc
        if bom:
            # utf-16/utf-32 prepend a BOM to every encode() call
            raise ValueError(
                f"Encoding {self.encoding!r} emits a byte-order mark; "
                "use an explicit-endian variant such as 'utf-16-le'"
            )

    def require_limit(self) -> int:
        if self.byte_limit is None:
            raise ValueError("byte_limit is not set")
        return self.byte_limit

    def byte_length(self, text: str) -> int:
        return len(text.encode(self.encoding))
