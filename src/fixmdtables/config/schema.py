"""Pydantic models for alignment and file-discovery settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from fixmdtables.config.defaults import (
    DEFAULT_DOCS_DIR,
    DEFAULT_EXTENSIONS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SKIP_DIRS,
)
from fixmdtables.errors.exceptions import ConfigError
from fixmdtables.tables.width import GlyphRange, build_ranges


class AlignmentOptions(BaseModel):
    """Settings that change how tables are compensated."""

    model_config = ConfigDict(frozen=True)

    include_letterlike: bool = True
    include_extended_pictographs: bool = True
    rewrite_separators: bool = True
    extra_ranges: tuple[tuple[int, int], ...] = ()

    @field_validator("extra_ranges")
    @classmethod
    def _check_ranges(cls, value: tuple[tuple[int, int], ...]) -> tuple[tuple[int, int], ...]:
        for start, end in value:
            if start < 0 or end > 0x10FFFF or start > end:
                raise ValueError(f"Invalid code point range: {start:#x}-{end:#x}")
        return value

    @property
    def ranges(self) -> tuple[GlyphRange, ...]:
        return build_ranges(
            include_letterlike=self.include_letterlike,
            include_extended=self.include_extended_pictographs,
            extra=self.extra_ranges,
        )


class FileOptions(BaseModel):
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    skip_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    docs_dir: str = DEFAULT_DOCS_DIR


class AppConfig(BaseModel):
    alignment: AlignmentOptions = Field(default_factory=AlignmentOptions)
    files: FileOptions = Field(default_factory=FileOptions)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_mapping(cls, config: dict[str, Any]) -> AppConfig:
        """Build validated settings from a flat merged config dict.

        Raises ConfigError when any value fails validation.
        """
        alignment_keys = AlignmentOptions.model_fields.keys()
        file_keys = FileOptions.model_fields.keys()
        try:
            return cls(
                alignment=AlignmentOptions(
                    **{k: v for k, v in config.items() if k in alignment_keys}
                ),
                files=FileOptions(**{k: v for k, v in config.items() if k in file_keys}),
                log_level=str(config.get("log_level", DEFAULT_LOG_LEVEL)).upper(),
            )
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
