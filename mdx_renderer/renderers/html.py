"""HTML renderer that dispatches custom components to a handler."""

from __future__ import annotations

import asyncio
import html
import logging
from dataclasses import dataclass, field
from typing import Sequence

from mdx_renderer.errors import HandlerError
from mdx_renderer.markup import VOID_ELEMENTS, Element, Node, Text

from .base import ComponentProps, Handler, RenderOptions, TagKind, classify_tag
from .handlers import HandlerFunction, as_handler

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HtmlRenderer:
    """Walks a node forest depth-first, children before their parent.

    Standard elements are re-serialised; custom components are replaced by
    whatever the handler returns for them. The renderer keeps no state between
    calls, so one forest can be rendered repeatedly with different handlers.
    """

    handler: Handler | HandlerFunction | None = None
    options: RenderOptions = field(default_factory=RenderOptions)

    def __post_init__(self) -> None:
        self.handler = as_handler(self.handler)

    async def render_nodes(self, nodes: Sequence[Node]) -> str:
        """Render the element roots of a forest; top-level text is dropped."""
        roots = [node for node in nodes if isinstance(node, Element)]
        return "".join(await self._render_all(roots))

    async def render_element(self, element: Element) -> str:
        return await self._render_node(element)

    # Internal helpers -------------------------------------------------
    async def _render_all(self, nodes: Sequence[Node]) -> list[str]:
        if not self.options.concurrent or len(nodes) < 2:
            return [await self._render_node(node) for node in nodes]

        try:
            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(self._render_node(node)) for node in nodes]
        except ExceptionGroup as errors:
            # Surface the first failure the same way sequential rendering does.
            first, *rest = errors.exceptions
            for error in rest:
                logger.debug("Discarding concurrent sibling failure: %r", error, exc_info=error)
            raise first from None
        return [task.result() for task in tasks]

    async def _render_node(self, node: Node) -> str:
        if isinstance(node, Text):
            return node.content
        if not isinstance(node, Element):
            return ""

        children = "".join(await self._render_all(node.children))

        if classify_tag(node.name) is TagKind.CUSTOM:
            return await self._render_component(node, children)
        return serialize_element(node, children)

    async def _render_component(self, element: Element, children: str) -> str:
        props = ComponentProps(
            id=element.id,
            classes=tuple(element.classes),
            attributes=dict(element.attributes),
            children=children,
        )
        logger.debug("Dispatching <%s> to %s", element.name, type(self.handler).__name__)
        try:
            return await self.handler.handle(element.name, props)
        except HandlerError:
            raise
        except Exception as exc:
            raise HandlerError(element.name, f"Component <{element.name}> failed: {exc}") from exc


def serialize_element(element: Element, children: str) -> str:
    """Re-emit a standard element around already-rendered children.

    Attributes keep their source order, followed by ``class`` and then ``id``.
    """
    parts = [element.name]
    for key, value in element.attributes.items():
        parts.append(key if value is None else f'{key}="{html.escape(value)}"')
    if element.classes:
        parts.append(f'class="{html.escape(" ".join(element.classes))}"')
    if element.id is not None:
        parts.append(f'id="{html.escape(element.id)}"')

    opening = " ".join(parts)
    if element.name in VOID_ELEMENTS:
        return f"<{opening} />"
    return f"<{opening}>{children}</{element.name}>"


__all__ = ["HtmlRenderer", "serialize_element"]
