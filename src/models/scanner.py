"""
Scanner-specific data models

Type-safe structures for tag scanner results.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TagMatch:
    """
    One tag span located in source text

    Produced by TagScanner for every <...> span it recognizes and consumed
    immediately by the style engine.

    Attributes:
        start: Position of the opening '<' in source
        end: Position just past the closing '>'
        token: Text between the delimiters (e.g., "red", "/bold",
               'hover:show_text:"<red>hi</red>"')
        inner: Quoted inner segment without its quotes, or None if the
               token carries no quoted argument

    Example:
        For source 'a<hover:show_text:"hi">' the match is:
        TagMatch(start=1, end=23, token='hover:show_text:"hi"', inner="hi")
    """
    start: int
    end: int
    token: str
    inner: Optional[str] = None

    @property
    def text(self) -> str:
        """The tag exactly as written, delimiters included"""
        return f"<{self.token}>"
