"""Top-level package for rendering markdown with embedded custom components."""

__version__ = "0.1.0"

from .errors import CompileError, HandlerError, MdxError, ParseError  # noqa: E402
from .pipeline import render, render_path, render_sync  # noqa: E402
from .renderers import (  # noqa: E402
    ComponentProps,
    ComponentRegistry,
    FunctionHandler,
    Handler,
    HtmlRenderer,
    NullHandler,
    RenderOptions,
)

__all__ = [
    "__version__",
    "CompileError",
    "ComponentProps",
    "ComponentRegistry",
    "FunctionHandler",
    "Handler",
    "HandlerError",
    "HtmlRenderer",
    "MdxError",
    "NullHandler",
    "ParseError",
    "RenderOptions",
    "render",
    "render_path",
    "render_sync",
]
