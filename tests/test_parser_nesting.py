"""
Nesting parser tests - verify style resolution across nested tags

Tests stack discipline for colors and click actions, set discipline for
decorations, and document ordering of the emitted nodes.
"""

from richtag.lib.parser import parse
from richtag.models import ClickAction, ClickEvent, Color, Decoration, TextNode


def styles(root):
    """(content, color, decorations) for each child"""
    return [(c.content, c.color, c.decorations) for c in root.children]


class TestColorStack:
    """Colors: last opened wins, close reveals the previous one"""

    def test_nested_colors(self):
        """<red>a<blue>b</blue>c</red> gives red, blue, red"""
        root = parse("<red>a<blue>b</blue>c</red>")

        assert [(c.content, c.color) for c in root.children] == [
            ("a", Color.RED),
            ("b", Color.BLUE),
            ("c", Color.RED),
        ]

    def test_close_name_ignored(self):
        """Closing red while blue is on top pops blue"""
        root = parse("<red>a<blue>b</red>c")
        assert root.children[2] == TextNode(content="c", color=Color.RED)

    def test_three_levels(self):
        """Deep nesting unwinds in order"""
        root = parse("<gold>1<aqua>2<gray>3</gray>4</aqua>5</gold>6")

        assert [c.color for c in root.children] == [
            Color.GOLD, Color.AQUA, Color.GRAY, Color.AQUA, Color.GOLD, None
        ]


class TestDecorationSet:
    """Decorations: set semantics, close removes outright"""

    def test_interleaved_decorations(self):
        """<bold>a<italic>b</bold>c</italic> gives bold, bold+italic, italic"""
        root = parse("<bold>a<italic>b</bold>c</italic>")

        assert styles(root) == [
            ("a", None, frozenset({Decoration.BOLD})),
            ("b", None, frozenset({Decoration.BOLD, Decoration.ITALIC})),
            ("c", None, frozenset({Decoration.ITALIC})),
        ]

    def test_double_open_single_close(self):
        """Re-opening bold does not require two closes"""
        root = parse("<bold><bold>a</bold>b")

        assert styles(root) == [
            ("a", None, frozenset({Decoration.BOLD})),
            ("b", None, frozenset()),
        ]

    def test_decorations_with_color(self):
        """Decorations and colors combine independently"""
        root = parse("<red><underlined>a</red>b")

        assert styles(root) == [
            ("a", Color.RED, frozenset({Decoration.UNDERLINED})),
            ("b", None, frozenset({Decoration.UNDERLINED})),
        ]


class TestAdjacentTags:
    """Back-to-back tags each take effect"""

    def test_adjacent_open_tags(self):
        """<red><bold>x applies both tags"""
        assert parse("<red><bold>x") == TextNode(
            content="x", color=Color.RED, decorations=frozenset({Decoration.BOLD})
        )

    def test_adjacent_with_unknown(self):
        """An unknown tag between known ones does not hide them"""
        root = parse("<red><nope><italic>x")

        assert styles(root) == [
            ("<nope>", Color.RED, frozenset()),
            ("x", Color.RED, frozenset({Decoration.ITALIC})),
        ]


class TestClickStack:
    """Click actions nest like colors"""

    def test_nested_clicks(self):
        """Inner click overrides, close reveals the outer one"""
        root = parse(
            "<click:run_command:/help>a<click:open_url:https://example.org>b</click>c</click>d"
        )
        help_click = ClickEvent(ClickAction.RUN_COMMAND, "/help")
        url_click = ClickEvent(ClickAction.OPEN_URL, "https://example.org")

        assert [(c.content, c.click) for c in root.children] == [
            ("a", help_click),
            ("b", url_click),
            ("c", help_click),
            ("d", None),
        ]

    def test_click_with_style(self):
        """Click and color both apply to the same text"""
        node = parse("<click:suggest_command:/msg Ann ><green>reply")

        assert node == TextNode(
            content="reply",
            color=Color.GREEN,
            click=ClickEvent(ClickAction.SUGGEST_COMMAND, "/msg Ann "),
        )


class TestOrdering:
    """Nodes follow document order"""

    def test_flatten_drops_only_recognized_tags(self):
        """Flattened text is the source minus recognized tags"""
        root = parse("Hello <bold>big</bold> <red>world</red>!")
        assert root.text_flatten() == "Hello big world!"

    def test_children_count(self):
        """Each literal span becomes one child"""
        root = parse("a<red>b</red>c<bold>d</bold>e")
        assert [c.content for c in root.children] == ["a", "b", "c", "d", "e"]
