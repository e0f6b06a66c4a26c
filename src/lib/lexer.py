"""
Custom Pygments lexer for richtag markup

Provides syntax highlighting for <tag> markup, used by the CLI's highlight
mode to render markup sources as HTML.

Token types:
- Keyword: click/hover tags (e.g., <click:open_url:...>)
- Name.Function: Decorations (e.g., <bold>, </italic>)
- Name.Tag: Palette colors (e.g., <red>, </dark_blue>)
- Name.Attribute: Click/hover action names
- String: Quoted hover bodies and click payloads
- Name.Builtin: Unrecognized tags (rendered literally by the parser)
- Text: Everything else
"""

import re

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
)

from ..models.vocabulary import ClickAction, Color, Decoration, HoverAction


def _names(vocabulary) -> str:
    """Regex alternation of vocabulary names, longest first"""
    return "|".join(sorted((member.value for member in vocabulary), key=len, reverse=True))


COLORS = _names(Color)
DECORATIONS = _names(Decoration)
ACTIONS = _names(list(ClickAction) + list(HoverAction))


class RichtagLexer(RegexLexer):
    """
    Lexer for richtag markup

    Highlights <tag> syntax, including markup nested in hover bodies.

    Example:
        <red>Hi</red> <hover:show_text:"<bold>tip">?</hover>

    Tokens:
        < → Punctuation
        red → Name.Tag
        > → Punctuation
        Hi → Text
        hover → Keyword
        show_text → Name.Attribute
        " → String (enters nested markup)
    """

    name = 'Richtag'
    aliases = ['richtag', 'rt']
    filenames = ['*.rt']
    flags = re.IGNORECASE | re.MULTILINE

    tokens = {
        'root': [
            # Hover with quoted body: highlight the body as markup
            (r'(<)(hover)(:)(' + ACTIONS + r'|[^:<>]*)(:)(")',
             bygroups(Punctuation, Keyword, Punctuation, Name.Attribute, Punctuation, String),
             'quoted'),

            # Click tags: payload runs to the closing delimiter
            (r'(<)(click)(:)(' + ACTIONS + r'|[^:<>]*)(:)([^<>]*)(>)',
             bygroups(Punctuation, Keyword, Punctuation, Name.Attribute, Punctuation,
                      String, Punctuation)),

            # Closing click/hover
            (r'(</)(click|hover)(>)', bygroups(Punctuation, Keyword, Punctuation)),

            # Decorations, open or closed
            (r'(</?)(' + DECORATIONS + r')(>)', bygroups(Punctuation, Name.Function, Punctuation)),

            # Colors, open or closed
            (r'(</?)(' + COLORS + r')(>)', bygroups(Punctuation, Name.Tag, Punctuation)),

            # Any other tag is kept literally by the parser
            (r'<[^<>]+>', Name.Builtin),

            # Everything else is text
            (r'[^<]+', Text),
            (r'.', Text),
        ],

        'quoted': [
            # End of hover body
            (r'(")(>)', bygroups(String, Punctuation), '#pop'),
            (r'"', String, '#pop'),

            (r'(</?)(' + DECORATIONS + r')(>)', bygroups(Punctuation, Name.Function, Punctuation)),
            (r'(</?)(' + COLORS + r')(>)', bygroups(Punctuation, Name.Tag, Punctuation)),
            (r'<[^<>"]+>', Name.Builtin),

            (r'[^<"]+', String),
            (r'.', String),
        ],
    }


def get_lexer() -> RichtagLexer:
    """
    Get the RichtagLexer instance

    Returns:
        RichtagLexer instance ready for use with Pygments
    """
    return RichtagLexer()


def markup_highlight(source: str, style: str = "default", title: str = "") -> str:
    """
    Render markup source as a standalone highlighted HTML page

    Args:
        source: Markup text
        style: Pygments style name
        title: HTML page title

    Returns:
        Complete HTML document
    """
    formatter = HtmlFormatter(full=True, style=style, title=title)
    return highlight(source, get_lexer(), formatter)
