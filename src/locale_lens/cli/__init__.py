"""CLI entry point. Registers all subcommands."""

import typer

app = typer.Typer(
    name="locale-lens",
    help="locale-lens - Locale key catalogue extraction",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .scan import scan as _scan, where as _where  # noqa: F401, E402


def main() -> None:
    app()
