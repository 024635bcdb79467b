"""File discovery and in-place rewriting around the table engine."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

from fixmdtables.config.schema import AlignmentOptions, FileOptions
from fixmdtables.core import get_transform
from fixmdtables.errors.exceptions import FileProcessingError
from fixmdtables.types import FileResult, Mode, RunSummary

logger = logging.getLogger(__name__)

_DEFAULT_FILE_OPTIONS = FileOptions()


def is_markdown_file(name: str | Path, extensions: Iterable[str] | None = None) -> bool:
    """Case-sensitive suffix check against the configured extensions."""
    exts = tuple(extensions) if extensions is not None else tuple(_DEFAULT_FILE_OPTIONS.extensions)
    return str(name).endswith(exts)


def find_markdown_files(directory: Path, options: FileOptions | None = None) -> list[Path]:
    """Recursively collect markdown files under ``directory``.

    Hidden directories and configured dependency directories are skipped.
    Unreadable directories are logged and skipped.
    """
    options = options or _DEFAULT_FILE_OPTIONS
    files: list[Path] = []

    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        logger.warning("Cannot read directory %s: %s", directory, e)
        return files

    for entry in entries:
        if entry.is_dir():
            if entry.name.startswith(".") or entry.name in options.skip_dirs:
                continue
            files.extend(find_markdown_files(entry, options))
        elif entry.is_file() and is_markdown_file(entry.name, options.extensions):
            files.append(entry)

    return files


def get_default_files(cwd: Path, options: FileOptions | None = None) -> list[Path]:
    """Markdown files directly in ``cwd`` plus everything under the docs directory."""
    options = options or _DEFAULT_FILE_OPTIONS
    files: list[Path] = []

    try:
        entries = sorted(cwd.iterdir())
    except OSError as e:
        logger.warning("Cannot read directory %s: %s", cwd, e)
        return files

    files.extend(e for e in entries if e.is_file() and is_markdown_file(e.name, options.extensions))

    docs_dir = cwd / options.docs_dir
    if docs_dir.is_dir():
        files.extend(find_markdown_files(docs_dir, options))

    return files


def collect_files(paths: Iterable[str | Path], options: FileOptions | None = None) -> list[Path]:
    """Expand path arguments into markdown files.

    Directories are walked; anything that is neither a directory nor a
    markdown file is reported and ignored.
    """
    options = options or _DEFAULT_FILE_OPTIONS
    files: list[Path] = []

    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            files.extend(find_markdown_files(path, options))
        elif path.is_file() and is_markdown_file(path.name, options.extensions):
            files.append(path)
        elif not path.exists():
            logger.warning("Skipping %s: no such file or directory", path)
        else:
            logger.warning("Skipping %s: not a markdown file", path)

    return files


def process_file(path: Path, transform: Callable[[str], str], write: bool = True) -> FileResult:
    """Apply ``transform`` to one file, writing back only when it changed."""
    try:
        content = _read(path)
        fixed = transform(content)
        changed = fixed != content
        if changed and write:
            _write(path, fixed)
            logger.info("Fixed: %s", path)
        elif changed:
            logger.info("Would fix: %s", path)
        return FileResult(path=path, changed=changed, written=changed and write)
    except FileProcessingError as e:
        logger.error("Error processing %s: %s", path, e.message)
        return FileResult(path=path, error=e.message)


def run(
    paths: Iterable[str | Path] | None,
    mode: Mode = Mode.FIX,
    alignment: AlignmentOptions | None = None,
    file_options: FileOptions | None = None,
    write: bool = True,
    cwd: Path | None = None,
) -> RunSummary:
    """Apply ``mode`` to the given paths, or to the default files when none are given."""
    paths = list(paths or [])
    if paths:
        files = collect_files(paths, file_options)
    else:
        files = get_default_files(cwd or Path.cwd(), file_options)

    logger.info("Processing %d markdown file(s) in %s mode", len(files), mode.value)

    transform = get_transform(mode, alignment)
    summary = RunSummary(mode=mode)
    for path in files:
        summary.results.append(process_file(path, transform, write=write))
    return summary


def _read(path: Path) -> str:
    try:
        # newline="" keeps CRLF line endings intact on the way back out
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileProcessingError(f"cannot read file: {e}", path=path, original=e) from e


def _write(path: Path, content: str) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileProcessingError(f"cannot write file: {e}", path=path, original=e) from e
