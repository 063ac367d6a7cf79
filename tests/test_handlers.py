from __future__ import annotations

import pytest

from mdx_renderer.renderers import (
    ComponentProps,
    ComponentRegistry,
    FunctionHandler,
    Handler,
    NullHandler,
    as_handler,
)


def test_null_handler_returns_empty_string(run):
    assert run(NullHandler().handle("Anything", ComponentProps(children="<p>x</p>"))) == ""


def test_function_handler_accepts_sync_and_async_functions(run):
    def sync_fn(name: str, props: ComponentProps) -> str:
        return f"{name}:{props.children}"

    async def async_fn(name: str, props: ComponentProps) -> str:
        return f"{name}!{props.children}"

    props = ComponentProps(children="c")

    assert run(FunctionHandler(sync_fn).handle("A", props)) == "A:c"
    assert run(FunctionHandler(async_fn).handle("B", props)) == "B!c"


def test_as_handler_coerces_supported_forms():
    registry = ComponentRegistry()

    assert isinstance(as_handler(None), NullHandler)
    assert as_handler(registry) is registry
    assert isinstance(as_handler(lambda name, props: ""), FunctionHandler)
    assert isinstance(registry, Handler)


def test_as_handler_rejects_unsupported_values():
    with pytest.raises(TypeError):
        as_handler(42)  # type: ignore[arg-type]


def test_registry_dispatches_registered_components(run):
    registry = ComponentRegistry()

    @registry.register("Layout")
    async def layout(props: ComponentProps) -> str:
        return f'<div class="layout">{props.children}</div>'

    registry.register("Title", lambda props: f"<h1>{props.attributes.get('text')}</h1>")

    assert "Layout" in registry
    assert run(registry.handle("Layout", ComponentProps(children="<p>x</p>"))) == (
        '<div class="layout"><p>x</p></div>'
    )
    assert run(registry.handle("Title", ComponentProps(attributes={"text": "Hi"}))) == "<h1>Hi</h1>"


def test_registry_defers_unknown_components_to_fallback(run):
    assert run(ComponentRegistry().handle("Unknown", ComponentProps(children="x"))) == ""

    async def fallback(name: str, props: ComponentProps) -> str:
        return f"<!-- missing {name} -->"

    registry = ComponentRegistry(_fallback=FunctionHandler(fallback))

    assert run(registry.handle("Unknown", ComponentProps())) == "<!-- missing Unknown -->"


def test_registry_rejects_empty_names():
    with pytest.raises(ValueError):
        ComponentRegistry().register("", lambda props: "")
