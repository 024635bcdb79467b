"""Top-level entry points: fix_table_alignment(), clean_table_alignment()."""

from __future__ import annotations

from functools import partial
from typing import Callable

from fixmdtables.config.schema import AlignmentOptions
from fixmdtables.tables.processor import clean_table, process_table
from fixmdtables.tables.scanner import scan_document
from fixmdtables.types import Mode

# Registry of whole-document transforms, keyed by mode
_MODE_REGISTRY: dict[Mode, Callable[..., str]] = {}


def _register(mode: Mode) -> Callable:
    """Decorator to register a document transform under a mode name."""
    def decorator(fn: Callable[..., str]) -> Callable[..., str]:
        _MODE_REGISTRY[mode] = fn
        return fn
    return decorator


def get_transform(
    mode: Mode | str, options: AlignmentOptions | None = None
) -> Callable[[str], str]:
    """Look up the transform for ``mode`` with ``options`` bound.

    Raises ValueError for an unknown mode.
    """
    fn = _MODE_REGISTRY.get(Mode(mode))
    if fn is None:
        raise ValueError(f"No transform registered for mode '{mode}'")
    return partial(fn, options=options)


@_register(Mode.FIX)
def fix_table_alignment(content: str, options: AlignmentOptions | None = None) -> str:
    """Add ideographic-space compensation to every table outside code fences.

    Running it again over its own output changes nothing.
    """
    return scan_document(content, partial(process_table, options=options))


@_register(Mode.CLEAN)
def clean_table_alignment(content: str, options: AlignmentOptions | None = None) -> str:
    """Replace ideographic spaces inside tables with two regular spaces.

    Meant to run before an external formatter reflows table whitespace.
    ``options`` is accepted for symmetry with the fix transform and unused.
    """
    return scan_document(content, clean_table)
