"""fix-md-tables — align markdown tables that contain emoji."""

from fixmdtables.core import clean_table_alignment, fix_table_alignment
from fixmdtables.tables.cells import FILLER

__all__ = [
    "FILLER",
    "clean_table_alignment",
    "fix_table_alignment",
]
