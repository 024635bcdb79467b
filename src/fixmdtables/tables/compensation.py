"""Per-column glyph maxima and filler-unit compensation."""

from __future__ import annotations

from fixmdtables.tables.width import DEFAULT_RANGES, GlyphRange, count_double_width

# Rows before this index are header and separator; they never set the maximum.
FIRST_DATA_ROW = 2

MAX_BASELINE = 2


def compute_max_per_column(
    parsed_rows: list[list[str]],
    num_cols: int,
    ranges: tuple[GlyphRange, ...] = DEFAULT_RANGES,
) -> list[int]:
    """Maximum glyph count per column, taken over data rows only.

    Short rows simply contribute nothing for their missing columns.
    """
    max_per_col = [0] * num_cols
    for row in parsed_rows[FIRST_DATA_ROW:]:
        for col, cell in enumerate(row[:num_cols]):
            max_per_col[col] = max(max_per_col[col], count_double_width(cell, ranges))
    return max_per_col


def compute_compensation(column_max: int, cell_count: int) -> int:
    """Number of filler units a cell needs to line up with its column.

    Every cell in a glyph-bearing column gets a baseline of
    ``min(2, column_max - 1)`` on top of the glyph deficit, including the
    cells that already hold the maximum. Plain cells in columns with more
    than two glyphs are capped at ``column_max - 1``.
    """
    if column_max <= 0:
        return 0

    baseline = min(MAX_BASELINE, column_max - 1)
    compensation = baseline + (column_max - cell_count)

    if cell_count == 0 and column_max > MAX_BASELINE:
        compensation = min(compensation, column_max - 1)

    return max(0, compensation)
