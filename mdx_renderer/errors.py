"""Exception hierarchy shared by every rendering stage."""

from __future__ import annotations


class MdxError(RuntimeError):
    """Base class for failures raised while rendering a document."""


class CompileError(MdxError):
    """Raised when source text cannot be compiled to markup."""


class ParseError(MdxError):
    """Raised when compiled markup is not a well-formed tree."""


class HandlerError(MdxError):
    """Raised when a custom component handler fails."""

    def __init__(self, component: str, message: str | None = None):
        self.component = component
        super().__init__(message or f"Component <{component}> failed to render.")


__all__ = ["MdxError", "CompileError", "ParseError", "HandlerError"]
