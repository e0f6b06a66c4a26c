"""
richtag library - tag scanner, style engine and tree builder
"""

__version__ = "1.0.0"

from .parser import Parser, parse
from .engine import StyleEngine, StyleContext, Disposition
from .scanner import TagScanner
from .tokens import placeholders_handle, tokens_escape, tokens_strip
from .errors import (
    MarkupError,
    MalformedTagError,
    InvalidActionError,
    InvalidArgumentError,
    TooDeepError,
)
from .log import LOG, state_connectToLogger

__all__ = [
    "Parser",
    "parse",
    "StyleEngine",
    "StyleContext",
    "Disposition",
    "TagScanner",
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
    "__version__",
]
