"""Stock component handlers."""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Union

from .base import ComponentProps, Handler

logger = logging.getLogger(__name__)

HandlerFunction = Callable[[str, ComponentProps], Union[str, Awaitable[str]]]
Component = Callable[[ComponentProps], Union[str, Awaitable[str]]]


class NullHandler:
    """Renders every custom component to an empty string."""

    async def handle(self, component_name: str, props: ComponentProps) -> str:
        return ""


@dataclass(slots=True, frozen=True)
class FunctionHandler:
    """Adapts a plain ``(name, props)`` function, sync or async, to ``Handler``."""

    function: HandlerFunction

    async def handle(self, component_name: str, props: ComponentProps) -> str:
        return await _resolve(self.function(component_name, props))


@dataclass(slots=True)
class ComponentRegistry:
    """Dispatches components by tag name, deferring unknown names to a fallback.

    Registered components receive only the props; the fallback handler gets
    the full ``(name, props)`` call.
    """

    _components: dict[str, Component] = field(default_factory=dict)
    _fallback: Handler | None = None

    def __post_init__(self) -> None:
        if self._fallback is None:
            self._fallback = NullHandler()

    def register(
        self,
        name: str,
        component: Component | None = None,
    ) -> Component | Callable[[Component], Component]:
        if not name:
            raise ValueError("Component name cannot be empty.")

        if component is None:

            def decorator(func: Component) -> Component:
                self._components[name] = func
                return func

            return decorator

        self._components[name] = component
        return component

    def __contains__(self, name: object) -> bool:
        return name in self._components

    async def handle(self, component_name: str, props: ComponentProps) -> str:
        component = self._components.get(component_name)
        if component is None:
            assert self._fallback is not None, "Fallback handler must be configured"
            logger.debug("No component registered for <%s>; using fallback", component_name)
            return await self._fallback.handle(component_name, props)
        return await _resolve(component(props))


def as_handler(handler: Handler | HandlerFunction | None) -> Handler:
    """Coerce ``None``, a handler object, or a plain function into a ``Handler``."""
    if handler is None:
        return NullHandler()
    if isinstance(handler, Handler):
        return handler
    if callable(handler):
        return FunctionHandler(handler)
    raise TypeError(f"Unsupported handler: {type(handler)!r}")


async def _resolve(result: str | Awaitable[str]) -> str:
    if inspect.isawaitable(result):
        return await result
    return result


__all__ = [
    "Component",
    "ComponentRegistry",
    "FunctionHandler",
    "HandlerFunction",
    "NullHandler",
    "as_handler",
]
