"""Row parsing and building.

``parse_row`` keeps cell whitespace untouched because that whitespace is the
budget the compensation pass spends. ``build_row(parse_row(row))`` returns the
trimmed row unchanged.
"""

from __future__ import annotations

from fixmdtables.types import CellParts


def parse_row(row: str) -> list[str]:
    trimmed = row.strip()
    return trimmed[1:-1].split("|")


def build_row(cells: list[str]) -> str:
    return "|" + "|".join(cells) + "|"


def split_cell_parts(cell: str) -> CellParts:
    """Split a cell into leading whitespace, content and trailing whitespace.

    Two bounded index walks, so the cost is linear in the cell length.
    """
    lead_end = 0
    while lead_end < len(cell) and cell[lead_end].isspace():
        lead_end += 1

    trail_start = len(cell)
    while trail_start > lead_end and cell[trail_start - 1].isspace():
        trail_start -= 1

    return CellParts(cell[:lead_end], cell[lead_end:trail_start], cell[trail_start:])
