"""Front-matter extraction for markdown sources."""

from __future__ import annotations

from typing import Any

import yaml

from mdx_renderer.errors import CompileError

Frontmatter = dict[str, Any]

_OPENING_MARKER = "---"
_CLOSING_MARKERS = frozenset({"---", "..."})


def split_frontmatter(source: str) -> tuple[Frontmatter, str]:
    """Return the parsed front-matter mapping and the remaining markdown body.

    A document carries front-matter only when its very first line is ``---``.
    The block runs until the next ``---`` (or ``...``) line and must hold a
    YAML mapping. Sources without the opening marker are returned untouched
    with an empty mapping.
    """
    text = source[1:] if source.startswith("\ufeff") else source
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _OPENING_MARKER:
        return {}, source

    end_index = next(
        (index for index in range(1, len(lines)) if lines[index].rstrip() in _CLOSING_MARKERS),
        None,
    )
    if end_index is None:
        raise CompileError("Unterminated front-matter: missing closing '---' line.")

    yaml_content = "".join(lines[1:end_index])
    body = "".join(lines[end_index + 1 :])
    return _load_mapping(yaml_content), body


def _load_mapping(yaml_content: str) -> Frontmatter:
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as exc:
        raise CompileError(f"Invalid front-matter: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise CompileError(
            f"Front-matter must be a key/value mapping, received {type(data).__name__}."
        )
    return {str(key): value for key, value in data.items()}


__all__ = ["Frontmatter", "split_frontmatter"]
