"""Double-width glyph classification.

Emoji coverage is a curated allowlist of code point ranges, not a Unicode
property. The ranges below are inclusive; the core set is always active and
the optional sets can be toggled through configuration.
"""

from __future__ import annotations

from collections.abc import Iterable

GlyphRange = tuple[int, int]

CORE_RANGES: tuple[GlyphRange, ...] = (
    (0x1F300, 0x1F9FF),  # Misc symbols & pictographs .. supplemental symbols
    (0x2600, 0x26FF),  # Misc symbols
    (0x2700, 0x27BF),  # Dingbats
    (0x231A, 0x23FA),  # Misc technical (watch, hourglass, media controls)
    (0x2B50, 0x2B55),  # Stars and circles
)

LETTERLIKE_RANGES: tuple[GlyphRange, ...] = ((0x2100, 0x214F),)
EXTENDED_PICTOGRAPH_RANGES: tuple[GlyphRange, ...] = ((0x1FA70, 0x1FAFF),)


def build_ranges(
    include_letterlike: bool = True,
    include_extended: bool = True,
    extra: Iterable[GlyphRange] = (),
) -> tuple[GlyphRange, ...]:
    """Assemble the active range table from the core set and optional sets."""
    ranges = list(CORE_RANGES)
    if include_letterlike:
        ranges.extend(LETTERLIKE_RANGES)
    if include_extended:
        ranges.extend(EXTENDED_PICTOGRAPH_RANGES)
    ranges.extend((int(start), int(end)) for start, end in extra)
    return tuple(sorted(set(ranges)))


DEFAULT_RANGES = build_ranges()


def is_double_width(char: str, ranges: tuple[GlyphRange, ...] = DEFAULT_RANGES) -> bool:
    cp = ord(char)
    return any(start <= cp <= end for start, end in ranges)


def count_double_width(text: str, ranges: tuple[GlyphRange, ...] = DEFAULT_RANGES) -> int:
    """Count code points in ``text`` that fall inside any of ``ranges``."""
    return sum(1 for char in text if is_double_width(char, ranges))
