"""
Styled text node models

The output tree of a parse. Every node is immutable once built: style
fields are plain values or frozensets and children are tuples.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from .vocabulary import ClickAction, Color, Decoration, HoverAction


@dataclass(frozen=True)
class ClickEvent:
    """
    Action performed when the text is clicked

    Attributes:
        action: What the click does (open a URL, run a command, ...)
        value: Action payload, verbatim from the tag (e.g., a URL)
    """
    action: ClickAction
    value: str

    def dict_export(self) -> Dict[str, Any]:
        return {"action": self.action.value, "value": self.value}


@dataclass(frozen=True)
class HoverEvent:
    """
    Content shown when the text is hovered

    Attributes:
        action: What kind of hover content this is
        value: Styled tree parsed from the tag's quoted inner text
    """
    action: HoverAction
    value: "TextNode"

    def dict_export(self) -> Dict[str, Any]:
        return {"action": self.action.value, "value": self.value.dict_export()}


@dataclass(frozen=True)
class TextNode:
    """
    A unit of styled text in the output tree

    Attributes:
        content: Literal text of this node (empty for a pure container)
        color: Palette color, or None to inherit from the renderer
        decorations: Active decorations
        click: Click action, if any
        hover: Hover action, if any
        children: Child nodes in document order

    Example:
        Parsing "<red>a</red>b" yields:
        TextNode(
            content="",
            children=(
                TextNode(content="a", color=Color.RED),
                TextNode(content="b"),
            )
        )
    """
    content: str = ""
    color: Optional[Color] = None
    decorations: FrozenSet[Decoration] = field(default_factory=frozenset)
    click: Optional[ClickEvent] = None
    hover: Optional[HoverEvent] = None
    children: Tuple["TextNode", ...] = ()

    def text_flatten(self) -> str:
        """
        Concatenate the plain text of this node and all descendants

        Returns:
            Text with all styling dropped, in document order
        """
        return self.content + "".join(child.text_flatten() for child in self.children)

    def dict_export(self) -> Dict[str, Any]:
        """
        Export node as a JSON/YAML-serializable dict

        Unset style fields are omitted. Decorations are sorted by name so
        output is stable.

        Returns:
            Dict with "content" and any of "color", "decorations", "click",
            "hover", "children"
        """
        data: Dict[str, Any] = {"content": self.content}
        if self.color is not None:
            data["color"] = self.color.value
        if self.decorations:
            data["decorations"] = sorted(decoration.value for decoration in self.decorations)
        if self.click is not None:
            data["click"] = self.click.dict_export()
        if self.hover is not None:
            data["hover"] = self.hover.dict_export()
        if self.children:
            data["children"] = [child.dict_export() for child in self.children]
        return data
