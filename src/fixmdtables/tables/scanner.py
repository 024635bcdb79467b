"""Document scanner: find table blocks outside code fences."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from fixmdtables.tables.lines import is_fence_end, is_fence_start, is_separator_line, is_table_row
from fixmdtables.types import FenceMarker

logger = logging.getLogger(__name__)

BlockProcessor = Callable[[list[str]], list[str]]


@dataclass
class FenceState:
    """Tracks whether the scanner is inside a fenced code block."""

    in_code_block: bool = False
    active_marker: FenceMarker | None = None

    def consume(self, line: str) -> bool:
        """Advance the state over ``line``.

        Returns True when the line belongs to a fence (opening, closing or
        body) and must be emitted untouched.
        """
        if self.in_code_block:
            if self.active_marker is not None and is_fence_end(line, self.active_marker):
                self.in_code_block = False
                self.active_marker = None
            return True

        marker = is_fence_start(line)
        if marker is not None:
            self.in_code_block = True
            self.active_marker = marker
            return True
        return False


def scan_document(content: str, process_block: BlockProcessor) -> str:
    """Run ``process_block`` over each table block in ``content``.

    Lines outside table blocks, and everything inside code fences, are
    returned exactly as they came in. An unterminated fence swallows the
    rest of the document.
    """
    lines = content.split("\n")
    result: list[str] = []
    fence = FenceState()
    i = 0

    while i < len(lines):
        line = lines[i]

        if fence.consume(line):
            result.append(line)
            i += 1
            continue

        if _starts_table(lines, i):
            end = i
            while end < len(lines) and is_table_row(lines[end]):
                end += 1
            logger.debug("Table block at lines %d-%d", i + 1, end)
            result.extend(process_block(lines[i:end]))
            i = end
            continue

        result.append(line)
        i += 1

    return "\n".join(result)


def _starts_table(lines: list[str], i: int) -> bool:
    line = lines[i]
    return (
        "|" in line
        and is_table_row(line)
        and i + 1 < len(lines)
        and is_separator_line(lines[i + 1])
    )
