"""
Parser for <tag> markup

Transforms markup text into a tree of styled TextNodes.

The parser walks the source once:
1. Scanning: TagScanner locates the next <tag> span
2. Styling: StyleEngine applies the tag to the active StyleContext
3. Building: literal text between tags becomes a child node stamped with
   the context active at that point; tags the engine does not recognize
   become literal nodes containing the tag as written

All children hang off an implicit empty root. If the root ends up with a
single child, that child is returned instead.

Example:
    >>> root = Parser("<red>Hello</red> world").parse()
    >>> [(c.content, c.color) for c in root.children]
    [('Hello', <Color.RED: 'red'>), (' world', None)]
"""

from typing import List, Mapping, Optional

from ..config import AppSettings, appsettings
from ..models.nodes import TextNode
from .engine import Disposition, StyleContext, StyleEngine
from .errors import TooDeepError
from .log import LOG
from .scanner import TagScanner
from .tokens import placeholders_handle


class Parser:
    """
    Parser for tag markup

    Handles:
    - Colors (stack), decorations (set), click and hover actions (stacks)
    - Hover bodies parsed recursively as independent markup
    - Unbalanced close tags (ignored) and unknown tags (kept as text)

    Style context and collected nodes are local to each parse() call, so a
    Parser may be parsed repeatedly and every call starts from a clean state.
    """

    def __init__(self, source: str, depth: int = 0, settings: Optional[AppSettings] = None):
        """
        Initialize parser with source text

        Args:
            source: Markup text to parse
            depth: Hover nesting depth of this parse (0 for top level)
            settings: Configuration; defaults to the appsettings singleton

        Attributes:
            source: Source text being parsed
            depth: Hover nesting depth
            settings: Active configuration
        """
        self.source = source
        self.depth = depth
        self.settings = settings if settings is not None else appsettings

    def parse(self) -> TextNode:
        """
        Parse source text into a styled node tree

        Returns:
            Root TextNode. For a source that yields exactly one node, that
            node itself is returned.

        Raises:
            MalformedTagError: Click/hover tag with too few fields
            InvalidActionError: Unknown click/hover action
            TooDeepError: Hover bodies nested beyond settings.max_depth

        Example:
            >>> Parser("plain").parse()
            TextNode(content='plain', color=None, decorations=frozenset(), ...)
        """
        if not self.settings.depth_check(self.depth):
            raise TooDeepError(
                f"Hover bodies nested deeper than {self.settings.max_depth}",
                self.source,
                0,
            )

        engine = StyleEngine(self.hover_parse, markup=self.source)
        trace_level = 1 if self.settings.debug_mode else 3
        context = StyleContext()
        children: List[TextNode] = []
        last_end = 0

        for tag in TagScanner(self.source):
            self.text_emit(children, context, self.source[last_end:tag.start])
            last_end = tag.end

            context, disposition = engine.token_apply(context, tag)
            LOG(f"Tag {tag.token!r} at {tag.start} -> {disposition.value}", level=trace_level)

            if disposition is Disposition.UNRECOGNIZED:
                children.append(context.node_make(tag.text))

        self.text_emit(children, context, self.source[last_end:])

        root = self.root_collapse(TextNode(content="", children=tuple(children)))
        LOG(f"Parsed {len(self.source)} characters into {len(children)} nodes", level=2)
        return root

    @staticmethod
    def text_emit(children: List[TextNode], context: StyleContext, text: str) -> None:
        """Append a literal span as a node stamped with context, unless empty"""
        if text:
            children.append(context.node_make(text))

    def hover_parse(self, inner: str) -> TextNode:
        """
        Parse a hover body with a fresh parser one level deeper

        Args:
            inner: Quoted inner text of a hover tag

        Returns:
            Tree for the hover body; shares no style state with this parse
        """
        return Parser(inner, depth=self.depth + 1, settings=self.settings).parse()

    @staticmethod
    def root_collapse(root: TextNode) -> TextNode:
        """Return the only child of an empty root, else the root itself"""
        if root.content == "" and len(root.children) == 1:
            return root.children[0]
        return root


def parse(
    markup: str,
    *placeholders: str,
    mapping: Optional[Mapping[str, str]] = None,
    settings: Optional[AppSettings] = None,
) -> TextNode:
    """
    Substitute placeholders, then parse markup into a styled node tree

    Args:
        markup: Markup text
        *placeholders: Flat name/value pairs; each <name> is replaced by value
        mapping: Alternative placeholder form, name -> value
        settings: Configuration; defaults to the appsettings singleton

    Returns:
        Root TextNode (collapsed to its single child where applicable)

    Raises:
        InvalidArgumentError: Odd number of flat placeholder arguments
        MalformedTagError, InvalidActionError, TooDeepError: See Parser.parse

    Example:
        >>> parse("<red>Hi <name>", "name", "Ann").text_flatten()
        'Hi Ann'
    """
    if placeholders:
        markup = placeholders_handle(markup, placeholders)
    if mapping:
        markup = placeholders_handle(markup, mapping)
    return Parser(markup, settings=settings).parse()
