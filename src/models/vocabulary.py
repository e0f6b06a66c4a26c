"""
Fixed markup vocabulary

Defines the delimiter characters and the closed sets of names the style
engine recognizes: palette colors, text decorations, click actions and
hover actions. Names are matched case-insensitively through a precomputed
name -> member table.
"""

from enum import Enum
from typing import Dict, Optional, Type, TypeVar


TAG_START = "<"
TAG_END = ">"
CLOSE_TAG = "/"
SEPARATOR = ":"
QUOTE = '"'
ESCAPE = "\\"

CLICK = "click"
HOVER = "hover"


V = TypeVar("V", bound="Vocabulary")


class Vocabulary(Enum):
    """
    Base for closed name sets

    Member values are the lowercase names as written in markup.
    """

    @classmethod
    def resolve(cls: Type[V], name: str) -> Optional[V]:
        """
        Look up a member by markup name (case-insensitive)

        Args:
            name: Name as written inside a tag (e.g., "Dark_Blue")

        Returns:
            Matching member, or None if the name is not in the set
        """
        return _lookup_tables[cls].get(name.lower())


class Color(Vocabulary):
    """The fixed 16-color palette"""
    BLACK = "black"
    DARK_BLUE = "dark_blue"
    DARK_GREEN = "dark_green"
    DARK_AQUA = "dark_aqua"
    DARK_RED = "dark_red"
    DARK_PURPLE = "dark_purple"
    GOLD = "gold"
    GRAY = "gray"
    DARK_GRAY = "dark_gray"
    BLUE = "blue"
    GREEN = "green"
    AQUA = "aqua"
    RED = "red"
    LIGHT_PURPLE = "light_purple"
    YELLOW = "yellow"
    WHITE = "white"


class Decoration(Vocabulary):
    """Independent boolean text decorations"""
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINED = "underlined"
    STRIKETHROUGH = "strikethrough"
    OBFUSCATED = "obfuscated"


class ClickAction(Vocabulary):
    """Actions a click tag may trigger"""
    OPEN_URL = "open_url"
    OPEN_FILE = "open_file"
    RUN_COMMAND = "run_command"
    SUGGEST_COMMAND = "suggest_command"
    CHANGE_PAGE = "change_page"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


class HoverAction(Vocabulary):
    """Actions a hover tag may show"""
    SHOW_TEXT = "show_text"
    SHOW_ITEM = "show_item"
    SHOW_ENTITY = "show_entity"


_lookup_tables: Dict[type, Dict[str, Vocabulary]] = {
    cls: {member.value: member for member in cls}
    for cls in (Color, Decoration, ClickAction, HoverAction)
}


def keyword_is(token: str, keyword: str) -> bool:
    """Check if token opens a keyword tag (e.g., "click:..." for CLICK)"""
    return token.lower().startswith(keyword + SEPARATOR)


def closeKeyword_is(token: str, keyword: str) -> bool:
    """Check if token is the closing form of a keyword tag (e.g., "/click")"""
    return token.lower() == CLOSE_TAG + keyword
