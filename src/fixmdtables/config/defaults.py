"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Glyph classification
DEFAULT_INCLUDE_LETTERLIKE = True
DEFAULT_INCLUDE_EXTENDED_PICTOGRAPHS = True

# Separator rows are rewritten alongside data rows
DEFAULT_REWRITE_SEPARATORS = True

# File discovery
DEFAULT_EXTENSIONS = [".md", ".mdx"]
DEFAULT_SKIP_DIRS = ["node_modules"]
DEFAULT_DOCS_DIR = "docs"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "include_letterlike": DEFAULT_INCLUDE_LETTERLIKE,
        "include_extended_pictographs": DEFAULT_INCLUDE_EXTENDED_PICTOGRAPHS,
        "rewrite_separators": DEFAULT_REWRITE_SEPARATORS,
        "extra_ranges": [],
        "extensions": list(DEFAULT_EXTENSIONS),
        "skip_dirs": list(DEFAULT_SKIP_DIRS),
        "docs_dir": DEFAULT_DOCS_DIR,
        "log_level": DEFAULT_LOG_LEVEL,
    }
