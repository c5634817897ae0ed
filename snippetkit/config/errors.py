from __future__ import annotations

from snippetkit.core.errors import SnippetError


class ConfigError(SnippetError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
