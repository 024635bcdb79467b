"""Error handling — exception hierarchy."""

from fixmdtables.errors.exceptions import ConfigError, FileProcessingError, FixMdTablesError

__all__ = [
    "FixMdTablesError",
    "ConfigError",
    "FileProcessingError",
]
