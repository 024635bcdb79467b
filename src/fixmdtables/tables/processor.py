"""Table processor: compensate one table block at a time.

A block arrives as raw lines (header, separator, data rows). Filler units
left by an earlier run are converted back to two spaces before anything is
measured, so re-running over an already compensated table reproduces it.
"""

from __future__ import annotations

import logging

from fixmdtables.config.schema import AlignmentOptions
from fixmdtables.tables.cells import (
    count_filler,
    normalize_filler,
    rewrite_data_cell,
    rewrite_separator_cell,
)
from fixmdtables.tables.compensation import compute_compensation, compute_max_per_column
from fixmdtables.tables.rows import build_row, parse_row
from fixmdtables.tables.width import GlyphRange, count_double_width
from fixmdtables.types import RowKind

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = AlignmentOptions()


def process_table(rows: list[str], options: AlignmentOptions | None = None) -> list[str]:
    """Compensate every cell of a table block for double-width glyphs.

    Returns the normalized rows untouched when the block is too short or
    has no glyphs at all. Never raises for malformed cells; they pass through.
    """
    options = options or _DEFAULT_OPTIONS
    ranges = options.ranges

    normalized = [normalize_filler(row) for row in rows]
    if len(rows) < 2 or not any(count_double_width(row, ranges) for row in normalized):
        return normalized

    original_cells = [parse_row(row) for row in rows]
    parsed = [parse_row(row) for row in normalized]
    num_cols = max(len(cells) for cells in parsed)
    max_per_col = compute_max_per_column(parsed, num_cols, ranges)
    if not any(max_per_col):
        return normalized

    logger.debug("Compensating table of %d rows, column maxima %s", len(rows), max_per_col)

    result: list[str] = []
    for row_idx, cells in enumerate(parsed):
        kind = RowKind.for_index(row_idx)
        originals = original_cells[row_idx]
        new_cells = [
            _process_cell(cell, originals[col], max_per_col[col], kind, ranges, options)
            for col, cell in enumerate(cells)
        ]
        lead, trail = _margins(rows[row_idx])
        result.append(lead + build_row(new_cells) + trail)

    return result


def clean_table(rows: list[str]) -> list[str]:
    """Turn every filler unit in the block back into two spaces."""
    return [normalize_filler(row) for row in rows]


def _process_cell(
    cell: str,
    original: str,
    column_max: int,
    kind: RowKind,
    ranges: tuple[GlyphRange, ...],
    options: AlignmentOptions,
) -> str:
    compensation = compute_compensation(column_max, count_double_width(cell, ranges))

    # Already carries exactly what this run would add.
    if compensation > 0 and count_filler(original) == compensation:
        return original

    if kind is RowKind.SEPARATOR:
        if not options.rewrite_separators:
            return cell
        return rewrite_separator_cell(cell, compensation)
    return rewrite_data_cell(cell, compensation)


def _margins(row: str) -> tuple[str, str]:
    """Whitespace outside the outer pipes, kept so indentation survives."""
    stripped = row.strip()
    if not stripped:
        return row, ""
    start = row.index(stripped)
    return row[:start], row[start + len(stripped) :]
