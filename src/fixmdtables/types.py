"""Shared types for fix-md-tables."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, Field

# ── Enums ──


class RowKind(StrEnum):
    HEADER = "header"
    SEPARATOR = "separator"
    DATA = "data"

    @classmethod
    def for_index(cls, row_idx: int) -> RowKind:
        """Row 0 is the header, row 1 the separator, everything after is data."""
        if row_idx == 0:
            return cls.HEADER
        if row_idx == 1:
            return cls.SEPARATOR
        return cls.DATA


class Mode(StrEnum):
    FIX = "fix"
    CLEAN = "clean"


# ── Line-level value types ──


class FenceMarker(NamedTuple):
    char: str
    length: int


class CellParts(NamedTuple):
    lead: str
    content: str
    trail: str


class SeparatorParts(NamedTuple):
    lead: str
    left_colon: str
    dashes: str
    gap: str
    right_colon: str
    trail: str


# ── Results ──


class FileResult(BaseModel):
    path: Path
    changed: bool = False
    written: bool = False
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class RunSummary(BaseModel):
    mode: Mode
    results: list[FileResult] = Field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.results)

    @property
    def changed(self) -> int:
        return sum(1 for r in self.results if r.changed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if r.failed)
