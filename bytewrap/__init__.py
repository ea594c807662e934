"""bytewrap - split text on a byte budget without breaking grapheme clusters."""

from .errors import BytewrapError, GraphemeClusterTooLargeError
from .split_config import SplitConfig
from .types import Line, Trace, TraceEvent
from .wrapper import ByteWrapper, iter_lines, iter_split, join_lines, split, wrap

# Version info
try:
    from ._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "ByteWrapper",
    "BytewrapError",
    "GraphemeClusterTooLargeError",
    "Line",
    "SplitConfig",
    "Trace",
    "TraceEvent",
    "iter_lines",
    "iter_split",
    "join_lines",
    "split",
    "wrap",
]
