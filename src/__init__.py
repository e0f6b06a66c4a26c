"""
richtag - Inline tag markup to styled text trees

Turns text such as "<red>Hello <bold>world</bold></red>" into a tree of
immutable styled nodes for chat, game and log renderers.
"""

__version__ = "1.0.0"

from .lib import (
    Parser,
    parse,
    placeholders_handle,
    tokens_escape,
    tokens_strip,
    MarkupError,
    MalformedTagError,
    InvalidActionError,
    InvalidArgumentError,
    TooDeepError,
    LOG,
    state_connectToLogger,
)
from .models import TextNode, ClickEvent, HoverEvent, Color, Decoration, ClickAction, HoverAction

__all__ = [
    "Parser",
    "parse",
    "placeholders_handle",
    "tokens_escape",
    "tokens_strip",
    "MarkupError",
    "MalformedTagError",
    "InvalidActionError",
    "InvalidArgumentError",
    "TooDeepError",
    "LOG",
    "state_connectToLogger",
    "TextNode",
    "ClickEvent",
    "HoverEvent",
    "Color",
    "Decoration",
    "ClickAction",
    "HoverAction",
    "__version__",
]
