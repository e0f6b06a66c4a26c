"""
Models package for richtag

Contains data structures and type definitions for the parse pipeline.
"""

from .state import ProgramState, pipeline
from .vocabulary import Color, Decoration, ClickAction, HoverAction
from .nodes import TextNode, ClickEvent, HoverEvent
from .scanner import TagMatch

__all__ = [
    "ProgramState",
    "pipeline",
    "Color",
    "Decoration",
    "ClickAction",
    "HoverAction",
    "TextNode",
    "ClickEvent",
    "HoverEvent",
    "TagMatch",
]
