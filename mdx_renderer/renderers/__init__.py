"""Renderer implementations and helpers."""

from .base import ComponentProps, Handler, RenderOptions, TagKind, classify_tag
from .handlers import ComponentRegistry, FunctionHandler, NullHandler, as_handler
from .html import HtmlRenderer, serialize_element

__all__ = [
    "ComponentProps",
    "ComponentRegistry",
    "FunctionHandler",
    "Handler",
    "HtmlRenderer",
    "NullHandler",
    "RenderOptions",
    "TagKind",
    "as_handler",
    "classify_tag",
    "serialize_element",
]
