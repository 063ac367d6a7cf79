"""Render a markdown document with embedded components to HTML on stdout."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mdx_renderer import MdxError, RenderOptions, render_path
from mdx_renderer.renderers import ComponentProps


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render an MDX-style markdown document to HTML.")
    parser.add_argument("path", type=Path, help="Path to a markdown document.")
    parser.add_argument(
        "--concurrent",
        action="store_true",
        help="Render sibling subtrees concurrently.",
    )
    parser.add_argument(
        "--show-components",
        action="store_true",
        help="Replace custom components with a visible placeholder instead of dropping them.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


async def placeholder(component_name: str, props: ComponentProps) -> str:
    return f'<div data-component="{component_name}">{props.children}</div>'


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger("render_mdx")

    handler = placeholder if args.show_components else None
    options = RenderOptions(concurrent=args.concurrent)
    try:
        output = asyncio.run(render_path(args.path, handler, options=options))
    except MdxError as exc:
        logger.error("Failed to render %s: %s", args.path, exc)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
