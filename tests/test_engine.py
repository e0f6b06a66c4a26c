"""
Style engine tests

Tests tag dispositions and the StyleContext transitions for colors,
decorations, click and hover actions, including no-op closes.
"""

import pytest

from richtag.lib.engine import Disposition, StyleContext, StyleEngine
from richtag.lib.errors import InvalidActionError, MalformedTagError
from richtag.models import ClickAction, ClickEvent, Color, Decoration, HoverAction, TextNode
from richtag.models.scanner import TagMatch


def tag_make(token, inner=None):
    """Build a TagMatch at position 0 for a token"""
    return TagMatch(start=0, end=len(token) + 2, token=token, inner=inner)


@pytest.fixture
def hover_calls():
    return []


@pytest.fixture
def engine(hover_calls):
    def hover_parse(inner):
        hover_calls.append(inner)
        return TextNode(content=inner)

    return StyleEngine(hover_parse)


class TestColors:
    """Colors use stack discipline"""

    def test_color_open(self, engine):
        """Palette name pushes the color"""
        context, disposition = engine.token_apply(StyleContext(), tag_make("red"))

        assert disposition is Disposition.COLOR_OPEN
        assert context.color is Color.RED

    def test_color_case_insensitive(self, engine):
        """Palette names match regardless of case"""
        context, disposition = engine.token_apply(StyleContext(), tag_make("Dark_Blue"))

        assert disposition is Disposition.COLOR_OPEN
        assert context.color is Color.DARK_BLUE

    def test_close_pops_latest_regardless_of_name(self, engine):
        """</red> pops blue if blue was opened last"""
        context = StyleContext(colors=(Color.RED, Color.BLUE))
        context, disposition = engine.token_apply(context, tag_make("/red"))

        assert disposition is Disposition.COLOR_CLOSE
        assert context.colors == (Color.RED,)

    def test_close_empty_is_noop(self, engine):
        """Closing with no color open leaves context unchanged"""
        context, disposition = engine.token_apply(StyleContext(), tag_make("/red"))

        assert disposition is Disposition.COLOR_CLOSE
        assert context == StyleContext()


class TestDecorations:
    """Decorations use set semantics"""

    def test_decoration_open(self, engine):
        """Decoration name adds the flag"""
        context, disposition = engine.token_apply(StyleContext(), tag_make("BOLD"))

        assert disposition is Disposition.DECORATION_OPEN
        assert context.decorations == frozenset({Decoration.BOLD})

    def test_open_is_idempotent(self, engine):
        """Opening an active decoration changes nothing"""
        context = StyleContext(decorations=frozenset({Decoration.BOLD}))
        new_context, _ = engine.token_apply(context, tag_make("bold"))

        assert new_context == context

    def test_close_removes_outright(self, engine):
        """Close removes the flag even with other decorations opened after it"""
        context = StyleContext(decorations=frozenset({Decoration.BOLD, Decoration.ITALIC}))
        context, disposition = engine.token_apply(context, tag_make("/bold"))

        assert disposition is Disposition.DECORATION_CLOSE
        assert context.decorations == frozenset({Decoration.ITALIC})

    def test_close_inactive_is_noop(self, engine):
        """Closing a decoration that is not active is harmless"""
        context, disposition = engine.token_apply(StyleContext(), tag_make("/underlined"))

        assert disposition is Disposition.DECORATION_CLOSE
        assert context.decorations == frozenset()


class TestClick:
    """click:<action>:<payload>"""

    def test_click_open(self, engine):
        """Action and payload are split on the first two separators"""
        context, disposition = engine.token_apply(
            StyleContext(), tag_make("click:open_url:https://example.org:8080/a")
        )

        assert disposition is Disposition.CLICK_OPEN
        assert context.click == ClickEvent(ClickAction.OPEN_URL, "https://example.org:8080/a")

    def test_click_keyword_case_insensitive(self, engine):
        """CLICK:RUN_COMMAND is recognized"""
        context, _ = engine.token_apply(StyleContext(), tag_make("CLICK:RUN_COMMAND:/help"))
        assert context.click == ClickEvent(ClickAction.RUN_COMMAND, "/help")

    def test_click_empty_payload(self, engine):
        """Trailing separator gives an empty payload"""
        context, _ = engine.token_apply(StyleContext(), tag_make("click:copy_to_clipboard:"))
        assert context.click == ClickEvent(ClickAction.COPY_TO_CLIPBOARD, "")

    def test_click_too_few_fields(self, engine):
        """Missing payload field is malformed"""
        with pytest.raises(MalformedTagError, match="too few args"):
            engine.token_apply(StyleContext(), tag_make("click:open_url"))

    def test_click_unknown_action(self, engine):
        """Unknown action name is a hard failure"""
        with pytest.raises(InvalidActionError, match="teleport"):
            engine.token_apply(StyleContext(), tag_make("click:teleport:spawn"))

    def test_click_close(self, engine):
        """</click> pops the latest click action"""
        first = ClickEvent(ClickAction.RUN_COMMAND, "/a")
        second = ClickEvent(ClickAction.RUN_COMMAND, "/b")
        context = StyleContext(clicks=(first, second))
        context, disposition = engine.token_apply(context, tag_make("/click"))

        assert disposition is Disposition.CLICK_CLOSE
        assert context.click == first

    def test_click_close_empty_is_noop(self, engine):
        """</click> with nothing open is ignored"""
        context, disposition = engine.token_apply(StyleContext(), tag_make("/click"))

        assert disposition is Disposition.CLICK_CLOSE
        assert context == StyleContext()


class TestHover:
    """hover:<action>:"<inner>" """

    def test_hover_open_parses_inner(self, engine, hover_calls):
        """Inner text is handed to the hover parser"""
        tag = tag_make('hover:show_text:"<red>hi</red>"', inner="<red>hi</red>")
        context, disposition = engine.token_apply(StyleContext(), tag)

        assert disposition is Disposition.HOVER_OPEN
        assert hover_calls == ["<red>hi</red>"]
        assert context.hover.action is HoverAction.SHOW_TEXT
        assert context.hover.value == TextNode(content="<red>hi</red>")

    def test_hover_too_few_fields(self, engine):
        """hover:show_text without a body is malformed"""
        with pytest.raises(MalformedTagError):
            engine.token_apply(StyleContext(), tag_make("hover:show_text"))

    def test_hover_missing_quotes(self, engine, hover_calls):
        """An unquoted body is malformed"""
        with pytest.raises(MalformedTagError, match="quoted"):
            engine.token_apply(StyleContext(), tag_make("hover:show_text:plain"))
        assert hover_calls == []

    def test_hover_inner_quotes(self, engine, hover_calls):
        """Quotes inside a hover body are malformed rather than dropped"""
        tag = tag_make('hover:show_text:"say "hi""', inner="")
        with pytest.raises(MalformedTagError, match="quoted"):
            engine.token_apply(StyleContext(), tag)
        assert hover_calls == []

    def test_hover_unknown_action(self, engine):
        """Unknown hover action is a hard failure"""
        with pytest.raises(InvalidActionError):
            engine.token_apply(StyleContext(), tag_make('hover:show_magic:"x"', inner="x"))

    def test_hover_close_empty_is_noop(self, engine):
        """</hover> with nothing open is ignored"""
        context, disposition = engine.token_apply(StyleContext(), tag_make("/hover"))

        assert disposition is Disposition.HOVER_CLOSE
        assert context == StyleContext()


class TestUnrecognized:
    """Tokens outside the vocabulary pass through"""

    @pytest.mark.parametrize("token", ["notareal", "/notareal", "red ", "b", "/", "clicky"])
    def test_unrecognized(self, engine, token):
        """Unknown tokens leave the context untouched"""
        context = StyleContext(colors=(Color.GOLD,))
        new_context, disposition = engine.token_apply(context, tag_make(token))

        assert disposition is Disposition.UNRECOGNIZED
        assert new_context is context


class TestNodeMake:
    """StyleContext stamps nodes with the top of each stack"""

    def test_node_make(self):
        click = ClickEvent(ClickAction.SUGGEST_COMMAND, "/msg ")
        context = StyleContext(
            colors=(Color.RED, Color.AQUA),
            decorations=frozenset({Decoration.ITALIC}),
            clicks=(click,),
        )
        node = context.node_make("hi")

        assert node == TextNode(
            content="hi",
            color=Color.AQUA,
            decorations=frozenset({Decoration.ITALIC}),
            click=click,
        )
