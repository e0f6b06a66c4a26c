"""
Token utilities built on the tag scanner

String-to-string helpers that recognize tags exactly as the parser does but
never interpret them:

- placeholders_handle: literal <name> -> value substitution before parsing
- tokens_escape: prefix both delimiters of every tag with a backslash
- tokens_strip: remove every tag, keeping literal text
"""

from typing import List, Mapping, Sequence, Union

from ..models.vocabulary import ESCAPE, TAG_END, TAG_START
from .errors import InvalidArgumentError
from .scanner import TagScanner


def placeholders_handle(
    markup: str, placeholders: Union[Sequence[str], Mapping[str, str]]
) -> str:
    """
    Replace <name> occurrences with their values

    Substitution is literal and applied in the order given, so a value
    inserted by one placeholder can be matched by a later one.

    Args:
        markup: Markup text
        placeholders: Either a flat sequence "name1", "value1", "name2", ...
                      or a mapping of name -> value

    Returns:
        Markup with placeholders substituted

    Raises:
        InvalidArgumentError: If the flat sequence has an odd length

    Example:
        >>> placeholders_handle("Hi <who>!", ["who", "<red>Ann</red>"])
        'Hi <red>Ann</red>!'
    """
    if isinstance(placeholders, Mapping):
        pairs = list(placeholders.items())
    else:
        if len(placeholders) % 2 != 0:
            raise InvalidArgumentError(
                "Invalid number of placeholders, expected name/value pairs: "
                "parse(markup, name, value, name, value...)"
            )
        pairs = [(placeholders[i], placeholders[i + 1]) for i in range(0, len(placeholders), 2)]

    for name, value in pairs:
        markup = markup.replace(f"{TAG_START}{name}{TAG_END}", value)
    return markup


def tokens_escape(markup: str) -> str:
    r"""
    Escape every tag so it is no longer interpreted as formatting

    Both delimiters of each tag get a backslash prefix. Quoted inner text of
    a tag is escaped recursively.

    Example:
        >>> tokens_escape("<red>hi</red>")
        '\\<red\\>hi\\</red\\>'
    """
    result: List[str] = []
    last_end = 0

    for tag in TagScanner(markup):
        result.append(markup[last_end:tag.start])
        last_end = tag.end

        token = tag.token
        if tag.inner:
            token = token.replace(tag.inner, tokens_escape(tag.inner))

        result.append(f"{ESCAPE}{TAG_START}{token}{ESCAPE}{TAG_END}")

    result.append(markup[last_end:])
    return "".join(result)


def tokens_strip(markup: str) -> str:
    """
    Remove every tag, keeping only literal text

    Removal repeats until no tag remains, since deleting one tag can join
    the text around it into a new one ("<<a>b>" -> "<b>" -> "").

    Example:
        >>> tokens_strip("<bold>Hello</bold> <notatag>world")
        'Hello world'
    """
    while True:
        result: List[str] = []
        last_end = 0
        for tag in TagScanner(markup):
            result.append(markup[last_end:tag.start])
            last_end = tag.end
        if last_end == 0:
            return markup
        result.append(markup[last_end:])
        markup = "".join(result)
