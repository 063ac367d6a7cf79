"""Markdown → markup compilation backed by Mistune."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import mistune

from mdx_renderer.errors import CompileError

from .component_blocks import component_blocks
from .frontmatter import Frontmatter, split_frontmatter

logger = logging.getLogger(__name__)

_DEFAULT_PLUGINS: tuple[str, ...] = ("table", "strikethrough")
PLUGINS_ENV_VAR = "MDX_MARKDOWN_PLUGINS"


@dataclass(slots=True)
class CompilerOptions:
    """Settings for the markdown stage.

    When ``plugins`` is left unset it is read from ``MDX_MARKDOWN_PLUGINS``
    (comma separated) and falls back to the built-in defaults.
    """

    plugins: tuple[str, ...] | None = None
    hard_wrap: bool = False
    frontmatter: bool = True

    def __post_init__(self) -> None:
        if self.plugins is None:
            configured = os.getenv(PLUGINS_ENV_VAR)
            if configured is not None:
                self.plugins = tuple(name.strip() for name in configured.split(",") if name.strip())
            else:
                self.plugins = _DEFAULT_PLUGINS
        else:
            self.plugins = tuple(self.plugins)


def compile_markdown(
    source: str,
    *,
    options: CompilerOptions | None = None,
) -> tuple[Frontmatter, str]:
    """Compile markdown source into ``(frontmatter, markup)``.

    Raw HTML, including custom component tags, is passed through unescaped so
    the markup parser sees it as part of the tree.
    """
    if not isinstance(source, str):
        raise CompileError(f"Markdown source must be str, received {type(source).__name__}.")

    opts = options or CompilerOptions()
    if opts.frontmatter:
        frontmatter, body = split_frontmatter(source)
    else:
        frontmatter, body = {}, source

    markdown = _create_markdown(opts)
    try:
        markup = markdown(body)
    except Exception as exc:
        raise CompileError(f"Markdown compilation failed: {exc}") from exc

    if not isinstance(markup, str):
        raise CompileError("Markdown renderer did not produce markup text.")

    logger.debug(
        "Compiled %d characters of markdown into %d characters of markup (%d front-matter keys)",
        len(body),
        len(markup),
        len(frontmatter),
    )
    return frontmatter, markup


def _create_markdown(options: CompilerOptions) -> mistune.Markdown:
    try:
        markdown = mistune.create_markdown(
            escape=False,
            hard_wrap=options.hard_wrap,
            renderer="html",
            plugins=list(options.plugins or ()),
        )
    except (AttributeError, ImportError, KeyError, ValueError) as exc:
        raise CompileError(f"Unable to configure markdown plugins {options.plugins!r}: {exc}") from exc
    component_blocks(markdown)
    return markdown


__all__ = ["CompilerOptions", "PLUGINS_ENV_VAR", "compile_markdown"]
