"""Markup → node forest parsing on top of ``html.parser``.

``HTMLParser`` folds tag and attribute names to lower case. Component tags are
recognised by their leading capital, so the builder recovers the names as
written from the raw start tag text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html.parser import HTMLParser

from mdx_renderer.errors import ParseError

from .nodes import Comment, Element, Node, Text

logger = logging.getLogger(__name__)

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Same shapes as the tolerant tag/attribute patterns HTMLParser matches with.
_TAG_NAME = re.compile(r"<([a-zA-Z][^\t\n\r\f />\x00]*)(?:\s|/(?!>))*")
_ATTRIBUTE = re.compile(
    r"((?<=['\"\s/])[^\s/>][^\s/=>]*)(\s*=+\s*"
    r"('[^']*'|\"[^\"]*\"|(?!['\"])[^>\s]*))?(?:\s|/(?!>))*"
)
_TRUNCATED_TAG = re.compile(r"<[a-zA-Z/!?]")


def parse_markup(markup: str) -> list[Node]:
    """Parse markup text into its ordered forest of top-level nodes."""
    if "\x00" in markup:
        raise ParseError("Markup contains a NUL character.")

    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    logger.debug("Parsed markup into %d top-level nodes", len(builder.roots))
    return builder.roots


@dataclass(slots=True)
class _OpenElement:
    name: str
    id: str | None
    classes: list[str]
    attributes: dict[str, str | None]
    children: list[Node] = field(default_factory=list)

    def freeze(self) -> Element:
        return Element(
            name=self.name,
            id=self.id,
            classes=tuple(self.classes),
            attributes=self.attributes,
            children=tuple(self.children),
        )


class _TreeBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.roots: list[Node] = []
        self._stack: list[_OpenElement] = []
        self._pending_text: list[str] = []

    # HTMLParser callbacks ---------------------------------------------
    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._flush_text()
        element = self._open(tag, attrs)
        if element.name in VOID_ELEMENTS:
            self._append(element.freeze())
        else:
            self._stack.append(element)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._append(self._open(tag, attrs).freeze())

    def handle_endtag(self, tag: str) -> None:
        self._flush_text()
        current = self._stack[-1] if self._stack else None
        if current is not None and current.name.lower() == tag:
            self._stack.pop()
            self._append(current.freeze())
            return
        if tag in VOID_ELEMENTS:
            return
        if current is None:
            raise ParseError(f"Closing tag </{tag}> has no matching opening tag.")
        raise ParseError(f"Closing tag </{tag}> does not match open element <{current.name}>.")

    def handle_data(self, data: str) -> None:
        self._pending_text.append(data)

    def handle_entityref(self, name: str) -> None:
        self._pending_text.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._pending_text.append(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        self._append(Comment(content=data))

    def set_cdata_mode(self, elem: str, *args, **kwargs) -> None:
        # <Script> and friends are components, their bodies are still markup.
        leading = (self.get_starttag_text() or "")[1:2]
        if leading.isascii() and leading.isupper():
            return
        super().set_cdata_mode(elem, *args, **kwargs)

    def close(self) -> None:
        if _TRUNCATED_TAG.match(self.rawdata):
            raise ParseError(f"Markup ends inside an unterminated tag: {self.rawdata[:40]!r}.")
        super().close()
        self._flush_text()
        if self._stack:
            unclosed = ", ".join(f"<{element.name}>" for element in self._stack)
            raise ParseError(f"Unclosed element(s) at end of markup: {unclosed}.")

    # Internal helpers -------------------------------------------------
    def _open(self, tag: str, attrs: list[tuple[str, str | None]]) -> _OpenElement:
        raw = self.get_starttag_text() or ""
        name, names = _source_names(raw, tag, attrs)

        element_id: str | None = None
        classes: list[str] = []
        attributes: dict[str, str | None] = {}
        for key, (lowered, value) in zip(names, attrs):
            if lowered == "id":
                if element_id is None:
                    element_id = value
            elif lowered == "class":
                classes.extend((value or "").split())
            elif key not in attributes:
                attributes[key] = value

        return _OpenElement(name=name, id=element_id, classes=classes, attributes=attributes)

    def _append(self, node: Node) -> None:
        self._flush_text()
        self._container().append(node)

    def _flush_text(self) -> None:
        if not self._pending_text:
            return
        content = "".join(self._pending_text)
        self._pending_text.clear()
        self._container().append(Text(content=content))

    def _container(self) -> list[Node]:
        return self._stack[-1].children if self._stack else self.roots


def _source_names(
    raw: str,
    tag: str,
    attrs: list[tuple[str, str | None]],
) -> tuple[str, list[str]]:
    lowered = [key for key, _ in attrs]
    match = _TAG_NAME.match(raw)
    if match is None or match.group(1).lower() != tag:
        return tag, lowered

    names: list[str] = []
    position = match.end()
    while position < len(raw):
        attribute = _ATTRIBUTE.match(raw, position)
        if attribute is None:
            break
        names.append(attribute.group(1))
        position = attribute.end()

    if [key.lower() for key in names] != lowered:
        return match.group(1), lowered
    return match.group(1), names


__all__ = ["VOID_ELEMENTS", "parse_markup"]
