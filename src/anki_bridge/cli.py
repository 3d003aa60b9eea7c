"""Command-line interface for talking to AnkiConnect."""

from __future__ import annotations

import typer

from .cli_commands import anki_commands

app = typer.Typer(
    name="anki-bridge",
    help="Query and drive Anki through the AnkiConnect add-on.",
    no_args_is_help=True,
)

anki_commands.register(app)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
