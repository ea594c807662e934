from .grapheme import GraphemeLineSplitter

__all__ = ["GraphemeLineSplitter"]
