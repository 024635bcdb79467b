"""Custom exception hierarchy for fix-md-tables.

The table engine itself never raises; these cover configuration and the
file boundary around it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class FixMdTablesError(Exception):
    """Base exception for all fix-md-tables errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(FixMdTablesError):
    """Invalid configuration — fail fast.

    Examples: malformed code point range, wrong type in a YAML config file.
    """


class FileProcessingError(FixMdTablesError):
    """A single file could not be read or written — other files continue."""

    def __init__(
        self,
        message: str = "",
        path: Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = path
        self.original = original
