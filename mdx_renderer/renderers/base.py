"""Renderer interfaces and shared helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from mdx_renderer.compiler import CompilerOptions


@dataclass(slots=True)
class RenderOptions:
    concurrent: bool = False
    compiler: CompilerOptions | None = None


class ComponentProps(BaseModel):
    """Standardised props handed to a custom component handler."""

    id: str | None = None
    classes: tuple[str, ...] = Field(default_factory=tuple)
    attributes: dict[str, str | None] = Field(default_factory=dict)
    children: str = ""

    model_config = ConfigDict(frozen=True)


@runtime_checkable
class Handler(Protocol):
    """Renders custom components into markup."""

    async def handle(self, component_name: str, props: ComponentProps) -> str:
        ...


class TagKind(str, Enum):
    STANDARD = "standard"
    CUSTOM = "custom"


def classify_tag(name: str) -> TagKind:
    """Custom components are tags whose first character is an ASCII capital."""
    if name[:1].isascii() and name[:1].isupper():
        return TagKind.CUSTOM
    return TagKind.STANDARD


__all__ = ["ComponentProps", "Handler", "RenderOptions", "TagKind", "classify_tag"]
