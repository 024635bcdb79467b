"""Click CLI for fix-md-tables — align emoji in markdown tables."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from fixmdtables.config.hierarchy import load_config_hierarchy
from fixmdtables.config.schema import AppConfig
from fixmdtables.errors.exceptions import ConfigError
from fixmdtables.files import run
from fixmdtables.types import Mode, RunSummary

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
        force=True,
    )


def _load_config(**overrides: Any) -> AppConfig:
    try:
        return AppConfig.from_mapping(load_config_hierarchy(**overrides))
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {e.message}")
        sys.exit(1)


_TRANSFORM_OPTIONS = [
    click.argument("paths", nargs=-1, type=click.Path()),
    click.option("--no-letterlike", is_flag=True, help="Ignore U+2100-U+214F letterlike symbols."),
    click.option("--no-extended", is_flag=True, help="Ignore U+1FA70-U+1FAFF pictographs."),
    click.option("--keep-separators", is_flag=True, help="Leave separator rows untouched."),
    click.option("--check", is_flag=True, help="Report files that would change without writing."),
    click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)."),
]


def _transform_options(func: Any) -> Any:
    """Shared arguments and flags for commands that rewrite files."""
    for decorator in reversed(_TRANSFORM_OPTIONS):
        func = decorator(func)
    return func


@click.group()
@click.version_option(package_name="fix-md-tables")
def cli() -> None:
    """fix-md-tables — align markdown tables containing emoji."""


@cli.command()
@_transform_options
def fix(
    paths: tuple[str, ...],
    no_letterlike: bool,
    no_extended: bool,
    keep_separators: bool,
    check: bool,
    verbose: int,
) -> None:
    """Add ideographic-space compensation to tables in PATHS.

    With no PATHS, processes markdown files in the current directory and docs/.
    """
    _run_mode(Mode.FIX, paths, no_letterlike, no_extended, keep_separators, check, verbose)


@cli.command()
@_transform_options
def clean(
    paths: tuple[str, ...],
    no_letterlike: bool,
    no_extended: bool,
    keep_separators: bool,
    check: bool,
    verbose: int,
) -> None:
    """Replace ideographic spaces in tables with regular spaces.

    Run this before a formatter that reflows table whitespace, then run fix.
    """
    _run_mode(Mode.CLEAN, paths, no_letterlike, no_extended, keep_separators, check, verbose)


def _run_mode(
    mode: Mode,
    paths: tuple[str, ...],
    no_letterlike: bool,
    no_extended: bool,
    keep_separators: bool,
    check: bool,
    verbose: int,
) -> None:
    config = _load_config(
        include_letterlike=False if no_letterlike else None,
        include_extended_pictographs=False if no_extended else None,
        rewrite_separators=False if keep_separators else None,
    )
    _setup_logging(verbose, config.log_level)

    summary = run(
        paths,
        mode=mode,
        alignment=config.alignment,
        file_options=config.files,
        write=not check,
    )
    _print_summary(summary, check)

    if summary.failed or (check and summary.changed):
        sys.exit(1)


def _print_summary(summary: RunSummary, check: bool) -> None:
    console.print(f"Processed {summary.processed} markdown file(s).")

    for result in summary.results:
        if result.failed:
            error_console.print(
                f"[red]✗ Error:[/red] {escape(str(result.path))}: {escape(result.error or '')}"
            )
        elif result.changed:
            verb = "Would fix" if check else "Fixed"
            console.print(f"[green]✓ {verb}:[/green] {escape(str(result.path))}")

    if summary.changed:
        action = "need" if check else "updated with"
        console.print(f"{summary.changed} file(s) {action} {summary.mode.value} changes.")


@cli.command("config")
def show_config() -> None:
    """Show the resolved configuration."""
    config = _load_config()

    table = Table(title="Resolved Configuration", show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    alignment = config.alignment
    table.add_row("include_letterlike", str(alignment.include_letterlike))
    table.add_row("include_extended_pictographs", str(alignment.include_extended_pictographs))
    table.add_row("rewrite_separators", str(alignment.rewrite_separators))
    table.add_row(
        "glyph_ranges",
        ", ".join(f"U+{start:04X}-U+{end:04X}" for start, end in alignment.ranges),
    )
    table.add_row("extensions", ", ".join(config.files.extensions))
    table.add_row("skip_dirs", ", ".join(config.files.skip_dirs))
    table.add_row("docs_dir", config.files.docs_dir)
    table.add_row("log_level", config.log_level)

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
