"""Mistune plugin: component tags on a line of their own open an HTML block.

Follows CommonMark's seventh HTML block kind for capitalised tag names: a
complete open, closing or self-closing tag alone on a line starts a raw block
that runs to the next blank line. Such a block cannot interrupt a paragraph.
"""

from __future__ import annotations

import re
from typing import Any

_TAG_NAME = r"[A-Z][A-Za-z0-9_.:-]*"
_ATTRIBUTE = (
    r"(?:\s+[A-Za-z_:][A-Za-z0-9_.:-]*"
    r"(?:\s*=\s*(?:\"[^\"]*\"|'[^']*'|[^\s\"'=<>`]+))?)"
)
COMPONENT_HTML = (
    r"^ {0,3}(?:<" + _TAG_NAME + _ATTRIBUTE + r"*\s*/?>|</" + _TAG_NAME + r"\s*>)[ \t]*$"
)

_BLANK_LINE = re.compile(r"\n[ \t]*\n")


def parse_component_html(block: Any, m: re.Match[str], state: Any) -> int | None:
    last_token = state.tokens[-1] if state.tokens else None
    if last_token and last_token.get("type") == "paragraph":
        return None

    blank = _BLANK_LINE.search(state.src, m.start())
    end_pos = blank.start() + 1 if blank else state.cursor_max
    raw = state.src[m.start() : end_pos].rstrip("\n")
    state.append_token({"type": "block_html", "raw": raw})
    return end_pos


def component_blocks(md: Any) -> None:
    """Register the component HTML block rule ahead of mistune's raw HTML rule."""
    md.block.register("component_html", COMPONENT_HTML, parse_component_html, before="raw_html")


__all__ = ["COMPONENT_HTML", "component_blocks"]
