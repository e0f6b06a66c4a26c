"""
Tag scanner for <tag> markup

Locates tag spans in raw text, left to right, without interpreting them.

Grammar for one tag:
    '<' token '>'
where token is either
    - any characters other than '<' and '>' followed by a "quoted" segment
      that may itself contain '<' and '>' (tried first), or
    - one or more characters other than '<' and '>'.

The quoted alternative is what allows hover tags to carry markup:
    <hover:show_text:"<red>hi</red>">

A quoted segment cannot itself contain '"'; the match then lands on the
last pair of quotes, which the style engine rejects as malformed.

Each tag is matched on its own, so back-to-back tags such as <red><bold>
always produce two independent matches. A '<' without a closing partner is
left as literal text.

Example:
    >>> [m.token for m in TagScanner("<red>a<bold>b")]
    ['red', 'bold']
"""

import re
from typing import Iterator, Optional

from ..models.scanner import TagMatch


TAG_PATTERN = re.compile(
    r'<(?P<token>[^<>]*"(?P<inner>[^"]*)"|[^<>]+)>'
)


class TagScanner:
    """
    Cursor over source text yielding TagMatch objects

    State is local to the instance: a scanner is created per parse and is
    not shared between parses.
    """

    def __init__(self, source: str):
        """
        Initialize scanner with source text

        Args:
            source: Markup text to scan

        Attributes:
            source: Source text being scanned
            position: Offset where the next search starts
        """
        self.source = source
        self.position = 0

    def match_next(self) -> Optional[TagMatch]:
        """
        Find the next tag at or after the current position

        Advances position past the returned tag.

        Returns:
            TagMatch for the next tag, or None when no tags remain

        Example:
            For source "a<red>b" at position 0:
            Returns TagMatch(start=1, end=6, token="red", inner=None)
            and leaves position at 6
        """
        match = TAG_PATTERN.search(self.source, self.position)
        if not match:
            self.position = len(self.source)
            return None

        self.position = match.end()
        return TagMatch(
            start=match.start(),
            end=match.end(),
            token=match.group("token"),
            inner=match.group("inner"),
        )

    def __iter__(self) -> Iterator[TagMatch]:
        while True:
            tag = self.match_next()
            if tag is None:
                return
            yield tag
