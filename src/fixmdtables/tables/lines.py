"""Line classification: table rows, separator rows and code fences."""

from __future__ import annotations

import re

from fixmdtables.types import FenceMarker

# Pipe-delimited run of whitespace, colons, dashes and ideographic spaces.
_SEPARATOR_LINE_RE = re.compile(r"^\s*\|[\s:|\-\u3000]+\|\s*$")
_FENCE_OPEN_RE = re.compile(r"^(`{3,}|~{3,})")


def is_separator_line(line: str) -> bool:
    """True for lines like ``| --- | :---: |``, including compensated ones."""
    return bool(_SEPARATOR_LINE_RE.match(line)) and "-" in line


def is_table_row(line: str) -> bool:
    trimmed = line.strip()
    return trimmed.startswith("|") and trimmed.endswith("|")


def is_fence_start(line: str) -> FenceMarker | None:
    """Return the opening marker if ``line`` opens a backtick or tilde fence."""
    match = _FENCE_OPEN_RE.match(line.strip())
    if not match:
        return None
    run = match.group(1)
    return FenceMarker(char=run[0], length=len(run))


def is_fence_end(line: str, marker: FenceMarker) -> bool:
    """A closing fence is the same character, at least as long, and nothing else."""
    trimmed = line.strip()
    if len(trimmed) < marker.length:
        return False
    return trimmed == marker.char * len(trimmed)
