"""Cell rewriting: spend trailing whitespace on filler units."""

from __future__ import annotations

import re

from fixmdtables.tables.rows import split_cell_parts
from fixmdtables.types import SeparatorParts

# U+3000 IDEOGRAPHIC SPACE renders two columns wide, same as an emoji.
FILLER = "\u3000"

# Single-width spaces paid per filler unit.
SPACES_PER_FILLER = 2

# The gap between dashes and a right colon is where filler sits after a clean.
_SEPARATOR_CELL_RE = re.compile(r"^(\s*)(:?)(-+)(?:(\s*)(:))?(\s*)$")


def normalize_filler(text: str) -> str:
    """Replace each filler unit with two ordinary spaces."""
    return text.replace(FILLER, " " * SPACES_PER_FILLER)


def count_filler(text: str) -> int:
    return text.count(FILLER)


def rewrite_data_cell(cell: str, compensation: int) -> str:
    """Append ``compensation`` filler units after the cell content.

    Two trailing spaces are removed per filler unit when the cell has them.
    With less room than that but at least one space per unit, all trailing
    space goes and the full compensation is still added. With even less
    room the cell is returned unchanged.
    """
    if compensation <= 0:
        return cell

    lead, content, trail = split_cell_parts(cell)
    required = compensation * SPACES_PER_FILLER

    if len(trail) >= required:
        return lead + content + FILLER * compensation + trail[required:]
    if len(trail) >= compensation:
        return lead + content + FILLER * compensation
    return cell


def split_separator_cell(cell: str) -> SeparatorParts | None:
    match = _SEPARATOR_CELL_RE.match(cell)
    if not match:
        return None
    return SeparatorParts(*(group or "" for group in match.groups()))


def rewrite_separator_cell(cell: str, compensation: int) -> str:
    """Trade whitespace, then dashes, for filler units in a separator cell.

    Whitespace is spent before dashes, so the two spaces a clean pass
    leaves in place of each filler unit pay for it again on the next fix.
    At least one dash is always kept. Cells that are not separator-shaped
    come back unchanged.
    """
    if compensation <= 0:
        return cell

    parts = split_separator_cell(cell)
    if parts is None:
        return cell

    budget = compensation * SPACES_PER_FILLER
    gap, budget = _spend(parts.gap, budget)
    trail, budget = _spend(parts.trail, budget)
    dashes = parts.dashes[: max(1, len(parts.dashes) - budget)]

    return (
        parts.lead
        + parts.left_colon
        + dashes
        + FILLER * compensation
        + gap
        + parts.right_colon
        + trail
    )


def _spend(space: str, budget: int) -> tuple[str, int]:
    """Drop up to ``budget`` characters from ``space``; return what is left of both."""
    used = min(len(space), budget)
    return space[used:], budget - used
