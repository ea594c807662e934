from .codepoint import CodepointSource
from .uax29 import RegexGraphemeSource

__all__ = ["CodepointSource", "RegexGraphemeSource"]
