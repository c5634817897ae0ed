from __future__ import annotations


class SnippetError(Exception):
    """Base exception for this project."""


class ShapeError(SnippetError):
    """Raised when a shape description is incomplete or invalid."""


class UnknownShapeError(ShapeError, ValueError):
    def __init__(self, shape: object):
        super().__init__(f"Unknown shape type: {shape!r}")
        self.shape = shape


class ProfileError(SnippetError):
    """Raised when a profile or a profile update is malformed."""
