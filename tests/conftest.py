from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import pytest

from mdx_renderer.markup import Element, Node, parse_markup
from mdx_renderer.renderers import ComponentProps, HtmlRenderer, RenderOptions

T = TypeVar("T")


@pytest.fixture
def run() -> Callable[[Awaitable[T]], T]:
    """Drive a coroutine to completion on a fresh event loop."""
    return asyncio.run


@pytest.fixture
def render_markup(run) -> Callable[..., str]:
    """Parse markup and render the resulting forest with the given handler."""

    def _render(markup: str, handler: Any = None, *, concurrent: bool = False) -> str:
        renderer = HtmlRenderer(handler, RenderOptions(concurrent=concurrent))
        return run(renderer.render_nodes(parse_markup(markup)))

    return _render


class RecordingHandler:
    """Handler that logs every call and wraps children in a visible marker."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ComponentProps]] = []

    async def handle(self, component_name: str, props: ComponentProps) -> str:
        self.calls.append((component_name, props))
        return f"[{component_name}:{props.children}]"

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def recording_handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def element_factory() -> Callable[..., Element]:
    def _factory(
        name: str,
        *,
        id: str | None = None,
        classes: tuple[str, ...] = (),
        attributes: dict[str, str | None] | None = None,
        children: tuple[Node, ...] = (),
    ) -> Element:
        return Element(
            name=name,
            id=id,
            classes=classes,
            attributes=attributes or {},
            children=children,
        )

    return _factory
