"""Constants for bytewrap - default configuration and program metadata."""

# Program metadata
PROGRAM_NAME = "bytewrap"

# Default configuration
# Keys mirror the fields of SplitConfig; every policy is off by default
# (strict, whitespace-preserving, lossless).
DEFAULT_CONFIG = {
    "continue_on_error": False,
    "break_grapheme_clusters": False,
    "trim_trailing_whitespace": False,
    # Codec used to count bytes
    "encoding": "utf-8",
}

# Characters removed by trim_trailing_whitespace
TRAILING_WHITESPACE = " \t\n\r"

# Information separators; str.isspace() accepts them but they never act as
# break opportunities
NON_BREAKING_CONTROLS = "\x1c\x1d\x1e\x1f"

DEFAULT_LINE_TERMINATOR = "\n"
