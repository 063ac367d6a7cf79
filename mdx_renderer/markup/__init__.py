"""Markup tree models and parsing."""

from .nodes import Comment, Element, Node, NodeKind, Text
from .parser import VOID_ELEMENTS, parse_markup

__all__ = ["Comment", "Element", "Node", "NodeKind", "Text", "VOID_ELEMENTS", "parse_markup"]
