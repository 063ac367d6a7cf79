"""Markdown compilation helpers."""

from .frontmatter import Frontmatter, split_frontmatter
from .markdown_compiler import (
    PLUGINS_ENV_VAR,
    CompilerOptions,
    compile_markdown,
)

__all__ = [
    "CompilerOptions",
    "Frontmatter",
    "PLUGINS_ENV_VAR",
    "compile_markdown",
    "split_frontmatter",
]
