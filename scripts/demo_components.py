"""Demo: render a markdown document whose custom tags come from a component registry."""

from __future__ import annotations

import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mdx_renderer import ComponentProps, ComponentRegistry, render_sync

SOURCE = """---
title: "Hello, world!"
---

# Hello, world!

This is a **markdown** file with some *content*, but also custom components!

<CustomTitle />

<Layout>

## subtitle

</Layout>
"""

registry = ComponentRegistry()


@registry.register("CustomTitle")
def custom_title(props: ComponentProps) -> str:
    return "<h1>Some custom title!</h1>"


@registry.register("Layout")
async def layout(props: ComponentProps) -> str:
    return f'<div class="layout">{props.children}</div>'


def main() -> None:
    print(render_sync(SOURCE, registry))


if __name__ == "__main__":
    main()
