"""
Markup error hierarchy

Every error raised while parsing markup derives from MarkupError and is
terminal for the parse call: no partial tree is returned. Unbalanced close
tags and unrecognized tags are never errors.
"""


class MarkupError(ValueError):
    """
    Base exception for all markup errors.

    Attributes:
        message: Human-readable error description
        markup: Source text being parsed when the error occurred
        position: Character position of the offending tag in markup

    str() shows the message followed by the source with a caret under the
    offending position, e.g.:

        MalformedTagError: Can't parse click action (too few args): click:open_url
        say <click:open_url>
            ^
    """

    def __init__(self, message: str, markup: str = "", position: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.markup = markup
        self.position = position

    def __str__(self) -> str:
        info = f"{self.__class__.__name__}: {self.message}"
        if not self.markup:
            return info
        return f"{info}\n{self.markup}\n{' ' * self.position}^"


class MalformedTagError(MarkupError):
    """Raised when a click/hover tag has too few fields or no quoted body."""

    pass


class InvalidActionError(MarkupError):
    """Raised when a click/hover action name is not a known action."""

    pass


class InvalidArgumentError(MarkupError):
    """Raised when placeholders are not given as name/value pairs."""

    pass


class TooDeepError(MarkupError):
    """Raised when hover bodies nest beyond the configured maximum depth."""

    pass
