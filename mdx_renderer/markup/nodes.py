"""Immutable node models produced by the markup parser."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


class Text(BaseModel):
    """Verbatim text span between tags."""

    kind: Literal[NodeKind.TEXT] = NodeKind.TEXT
    content: str

    model_config = ConfigDict(frozen=True)


class Comment(BaseModel):
    """Markup comment; kept in the tree but never rendered."""

    kind: Literal[NodeKind.COMMENT] = NodeKind.COMMENT
    content: str

    model_config = ConfigDict(frozen=True)


class Element(BaseModel):
    """Tagged element with its identity, classes, attributes and children.

    ``id`` and ``class`` are lifted out of ``attributes``; a ``None`` attribute
    value marks a boolean attribute written without a value.
    """

    kind: Literal[NodeKind.ELEMENT] = NodeKind.ELEMENT
    name: str = Field(min_length=1)
    id: str | None = None
    classes: tuple[str, ...] = Field(default_factory=tuple)
    attributes: dict[str, str | None] = Field(default_factory=dict)
    children: tuple[Node, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


Node = Annotated[Union[Element, Text, Comment], Field(discriminator="kind")]

Element.model_rebuild()


__all__ = ["Comment", "Element", "Node", "NodeKind", "Text"]
