from __future__ import annotations

from collections.abc import Iterator

import regex

# \X matches one extended grapheme cluster (UAX #29), including ZWJ emoji
# sequences, regional indicator pairs and combining mark runs.
_GRAPHEME_RE = regex.compile(r"\X")


class RegexGraphemeSource:
    def clusters(self, text: str) -> Iterator[str]:
        for match in _GRAPHEME_RE.finditer(text):
            yield match.group()
