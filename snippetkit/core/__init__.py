"""Shared building blocks (errors, clock)."""

from snippetkit.core.errors import ProfileError, ShapeError, SnippetError, UnknownShapeError

__all__ = ["ProfileError", "ShapeError", "SnippetError", "UnknownShapeError"]
