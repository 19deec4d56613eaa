"""Scan CLI commands -- list locale catalogues and find key definitions."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..aggregator import parse_locales
from ..exceptions import LocaleLensError
from ..models import Locale
from . import app
from ._common import console, err_console, resolve_config
from .progress import ParseProgress

_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to a locale-lens.toml file", exists=True, dir_okay=False
)
_WORKERS_OPTION = typer.Option(None, "--workers", "-w", help="Parallel extraction workers", min=1)
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show debug logging")
_QUIET_OPTION = typer.Option(False, "--quiet", "-q", help="Only log errors")
_LOG_FILE_OPTION = typer.Option(
    None, "--log-file", help="Also write log records to this file", dir_okay=False
)


def _collect(
    root: Path,
    config: Optional[Path],
    workers: Optional[int],
    verbose: bool,
    quiet: bool,
    log_file: Optional[Path],
    show_progress: bool,
) -> list[Locale]:
    try:
        settings = resolve_config(
            config, workers=workers, verbose=verbose, quiet=quiet, log_file=log_file
        )
        with ParseProgress(err_console, enabled=show_progress and not quiet) as progress:
            return parse_locales(progress, root=root, config=settings)
    except LocaleLensError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def scan(
    root: Path = typer.Argument(Path("."), help="Project directory to scan"),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output the full catalogue as JSON",
    ),
    config: Optional[Path] = _CONFIG_OPTION,
    workers: Optional[int] = _WORKERS_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    quiet: bool = _QUIET_OPTION,
    log_file: Optional[Path] = _LOG_FILE_OPTION,
):
    """
    Extract the locale key catalogue of a project.

    [bold cyan]Examples:[/bold cyan]

      locale-lens scan

      locale-lens scan ./web --json
    """
    locales = _collect(
        root, config, workers, verbose, quiet, log_file, show_progress=not json_output
    )

    if json_output:
        print(json.dumps([loc.to_dict() for loc in locales], indent=2))
        return

    if not locales:
        console.print("[yellow]No locale files found.[/yellow]")
        return

    table = Table(show_header=True, pad_edge=True)
    table.add_column("Language", style="bold cyan")
    table.add_column("File")
    table.add_column("Keys", justify="right")

    for loc in locales:
        count = len(loc.locale_keys)
        table.add_row(loc.lang, loc.file_path, str(count) if count else "[dim]0[/dim]")

    console.print(table)


@app.command()
def where(
    key: str = typer.Argument(..., help="Locale key to look up"),
    root: Path = typer.Argument(Path("."), help="Project directory to scan"),
    config: Optional[Path] = _CONFIG_OPTION,
    workers: Optional[int] = _WORKERS_OPTION,
    verbose: bool = _VERBOSE_OPTION,
    quiet: bool = _QUIET_OPTION,
    log_file: Optional[Path] = _LOG_FILE_OPTION,
):
    """
    Show where a locale key is defined in every language.

    Prints [bold]file:line:column[/bold] for each definition.

    [bold cyan]Examples:[/bold cyan]

      locale-lens where greeting

      locale-lens where nav.home ./web
    """
    locales = _collect(root, config, workers, verbose, quiet, log_file, show_progress=True)

    found = False
    for loc in locales:
        for locale_key in loc.find(key):
            found = True
            start = locale_key.location
            console.print(
                f"[bold cyan]{loc.lang}[/bold cyan]\t"
                f"{locale_key.source_path}:{start.start_line}:{start.start_column + 1}",
                highlight=False,
                soft_wrap=True,
            )

    if not found:
        console.print(f"[yellow]Key '{key}' is not defined in any locale file.[/yellow]")
        raise typer.Exit(1)
