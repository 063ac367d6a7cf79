"""End-to-end rendering: markdown → markup → node forest → HTML."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from mdx_renderer.compiler import compile_markdown
from mdx_renderer.markup import parse_markup
from mdx_renderer.renderers import Handler, HtmlRenderer, RenderOptions
from mdx_renderer.renderers.handlers import HandlerFunction

logger = logging.getLogger(__name__)


async def render(
    source: str,
    handler: Handler | HandlerFunction | None = None,
    *,
    options: RenderOptions | None = None,
) -> str:
    """Render a markdown document with embedded components to HTML.

    ``CompileError``, ``ParseError`` and ``HandlerError`` propagate to the
    caller; there is no partial output. Front-matter is parsed but is not
    passed on to the handler.
    """
    opts = options or RenderOptions()
    _frontmatter, markup = compile_markdown(source, options=opts.compiler)
    nodes = parse_markup(markup)
    renderer = HtmlRenderer(handler, opts)
    output = await renderer.render_nodes(nodes)
    logger.debug("Rendered document into %d characters", len(output))
    return output


async def render_path(
    path: str | Path,
    handler: Handler | HandlerFunction | None = None,
    *,
    options: RenderOptions | None = None,
) -> str:
    """Read a UTF-8 document from disk and render it."""
    source = Path(path).read_text(encoding="utf-8")
    return await render(source, handler, options=options)


def render_sync(
    source: str,
    handler: Handler | HandlerFunction | None = None,
    *,
    options: RenderOptions | None = None,
) -> str:
    """Blocking variant of :func:`render` for callers without an event loop."""
    return asyncio.run(render(source, handler, options=options))


__all__ = ["render", "render_path", "render_sync"]
