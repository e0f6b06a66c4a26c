"""
Style-state engine

Resolves tag tokens into formatting state. The active state at any point in
a scan is a StyleContext made of four parts:

- colors: stack, last opened wins; any color close pops the latest color
- decorations: set; open adds, close removes the flag outright, regardless
  of what was opened after it
- clicks: stack of ClickEvent
- hovers: stack of HoverEvent

Closing a stack with nothing open is a no-op. Contexts are immutable values;
every transition returns a new one.

Dispatch order (first match wins):
    click open/close, hover open/close, decoration open/close,
    color open/close, otherwise unrecognized.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, FrozenSet, Optional, Tuple

from ..models.nodes import ClickEvent, HoverEvent, TextNode
from ..models.scanner import TagMatch
from ..models.vocabulary import (
    CLICK,
    CLOSE_TAG,
    HOVER,
    QUOTE,
    SEPARATOR,
    ClickAction,
    Color,
    Decoration,
    HoverAction,
    closeKeyword_is,
    keyword_is,
)
from .errors import InvalidActionError, MalformedTagError
from .log import LOG


class Disposition(Enum):
    """What a tag token did to the style context"""
    COLOR_OPEN = "color-open"
    COLOR_CLOSE = "color-close"
    DECORATION_OPEN = "decoration-open"
    DECORATION_CLOSE = "decoration-close"
    CLICK_OPEN = "click-open"
    CLICK_CLOSE = "click-close"
    HOVER_OPEN = "hover-open"
    HOVER_CLOSE = "hover-close"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class StyleContext:
    """
    Formatting state active at one point in the scan

    Attributes:
        colors: Open colors, most recent last
        decorations: Currently active decorations
        clicks: Open click actions, most recent last
        hovers: Open hover actions, most recent last
    """
    colors: Tuple[Color, ...] = ()
    decorations: FrozenSet[Decoration] = field(default_factory=frozenset)
    clicks: Tuple[ClickEvent, ...] = ()
    hovers: Tuple[HoverEvent, ...] = ()

    @property
    def color(self) -> Optional[Color]:
        return self.colors[-1] if self.colors else None

    @property
    def click(self) -> Optional[ClickEvent]:
        return self.clicks[-1] if self.clicks else None

    @property
    def hover(self) -> Optional[HoverEvent]:
        return self.hovers[-1] if self.hovers else None

    def node_make(self, content: str) -> TextNode:
        """
        Build a text node stamped with this context

        Args:
            content: Literal text of the node

        Returns:
            TextNode carrying the top color/click/hover and all decorations
        """
        return TextNode(
            content=content,
            color=self.color,
            decorations=self.decorations,
            click=self.click,
            hover=self.hover,
        )


class StyleEngine:
    """
    Classifies tag tokens and computes the resulting StyleContext

    The engine holds no parse state of its own; the caller threads the
    context through successive token_apply() calls.
    """

    def __init__(self, hover_parse: Callable[[str], TextNode], markup: str = ""):
        """
        Initialize engine

        Args:
            hover_parse: Parses a hover body into a tree. Must start a fresh,
                         independent parse so no style state leaks between
                         the hover body and the surrounding text.
            markup: Source text, used only for error context
        """
        self.hover_parse = hover_parse
        self.markup = markup

    def token_apply(
        self, context: StyleContext, tag: TagMatch
    ) -> Tuple[StyleContext, Disposition]:
        """
        Apply one tag to a style context

        Args:
            context: Context active before the tag
            tag: Tag located by the scanner

        Returns:
            (new context, disposition). For UNRECOGNIZED the context is
            returned unchanged and the caller renders the tag literally.

        Raises:
            MalformedTagError: Click/hover tag with too few fields
            InvalidActionError: Click/hover action outside the known set
        """
        token = tag.token

        if keyword_is(token, CLICK):
            click = self.click_handle(tag)
            return replace(context, clicks=context.clicks + (click,)), Disposition.CLICK_OPEN
        if closeKeyword_is(token, CLICK):
            return replace(context, clicks=context.clicks[:-1]), Disposition.CLICK_CLOSE

        if keyword_is(token, HOVER):
            hover = self.hover_handle(tag)
            return replace(context, hovers=context.hovers + (hover,)), Disposition.HOVER_OPEN
        if closeKeyword_is(token, HOVER):
            return replace(context, hovers=context.hovers[:-1]), Disposition.HOVER_CLOSE

        decoration = Decoration.resolve(token)
        if decoration is not None:
            return (
                replace(context, decorations=context.decorations | {decoration}),
                Disposition.DECORATION_OPEN,
            )
        closed = self.closeName_get(token)
        closed_decoration = Decoration.resolve(closed) if closed is not None else None
        if closed_decoration is not None:
            return (
                replace(context, decorations=context.decorations - {closed_decoration}),
                Disposition.DECORATION_CLOSE,
            )

        color = Color.resolve(token)
        if color is not None:
            return replace(context, colors=context.colors + (color,)), Disposition.COLOR_OPEN
        if closed is not None and Color.resolve(closed) is not None:
            return replace(context, colors=context.colors[:-1]), Disposition.COLOR_CLOSE

        return context, Disposition.UNRECOGNIZED

    @staticmethod
    def closeName_get(token: str) -> Optional[str]:
        """Return the name inside a closing token ("/bold" -> "bold"), else None"""
        if token.startswith(CLOSE_TAG):
            return token[len(CLOSE_TAG):]
        return None

    def fields_split(self, tag: TagMatch, kind: str) -> Tuple[str, str, str]:
        """
        Split a click/hover token into keyword, action and argument

        Only the first two separators split; the argument keeps any further
        separators verbatim.

        Raises:
            MalformedTagError: If the token has fewer than three fields
        """
        fields = tag.token.split(SEPARATOR, 2)
        if len(fields) < 3:
            raise MalformedTagError(
                f"Can't parse {kind} action (too few args): {tag.token}",
                self.markup,
                tag.start,
            )
        return fields[0], fields[1], fields[2]

    def click_handle(self, tag: TagMatch) -> ClickEvent:
        """
        Build a ClickEvent from 'click:<action>:<payload>'

        Example:
            'click:open_url:https://example.org' ->
            ClickEvent(ClickAction.OPEN_URL, "https://example.org")
        """
        _, action_name, payload = self.fields_split(tag, CLICK)
        action = ClickAction.resolve(action_name)
        if action is None:
            raise InvalidActionError(
                f"Unknown click action '{action_name}'", self.markup, tag.start
            )
        return ClickEvent(action=action, value=payload)

    def hover_handle(self, tag: TagMatch) -> HoverEvent:
        """
        Build a HoverEvent from 'hover:<action>:"<inner>"'

        The inner text is parsed as markup in its own right.
        The argument must be exactly one quoted segment, so a body holding
        its own '"' raises MalformedTagError instead of losing its text.
        """
        _, action_name, argument = self.fields_split(tag, HOVER)
        action = HoverAction.resolve(action_name)
        if action is None:
            raise InvalidActionError(
                f"Unknown hover action '{action_name}'", self.markup, tag.start
            )
        if tag.inner is None or argument != QUOTE + tag.inner + QUOTE:
            raise MalformedTagError(
                f"Can't parse hover action (expected one quoted text without inner quotes): {tag.token}",
                self.markup,
                tag.start,
            )
        LOG(f"Parsing hover body at position {tag.start}: {tag.inner!r}", level=3)
        return HoverEvent(action=action, value=self.hover_parse(tag.inner))
