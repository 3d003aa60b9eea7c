"""AnkiConnect CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from .anki_handler import (
    parse_params,
    run_deck_stats,
    run_invoke,
    run_list_decks,
    run_version,
)
from .shared import get_client_and_logger

HostOption = Annotated[
    str | None,
    typer.Option("--host", help="AnkiConnect host (default: ANKI_CONNECT_HOST or 127.0.0.1)"),
]
PortOption = Annotated[
    int | None,
    typer.Option("--port", help="AnkiConnect port (default: ANKI_CONNECT_PORT or 8765)"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Log level (DEBUG, INFO, WARN, ERROR)"),
]


def register(app: typer.Typer) -> None:
    """Register AnkiConnect commands on the given Typer app."""

    @app.command(name="version")
    def version(
        host: HostOption = None,
        port: PortOption = None,
        log_level: LogLevelOption = "WARNING",
    ) -> None:
        """Show the AnkiConnect API version."""
        anki, logger = get_client_and_logger(host, port, log_level)
        run_version(anki, logger)

    @app.command(name="decks")
    def list_decks(
        host: HostOption = None,
        port: PortOption = None,
        log_level: LogLevelOption = "WARNING",
    ) -> None:
        """List deck names available via AnkiConnect."""
        anki, logger = get_client_and_logger(host, port, log_level)
        run_list_decks(anki, logger)

    @app.command(name="deck-stats")
    def deck_stats(
        decks: Annotated[list[str], typer.Argument(help="Deck names")],
        host: HostOption = None,
        port: PortOption = None,
        log_level: LogLevelOption = "WARNING",
    ) -> None:
        """Show total, new, learning and review counts per deck."""
        anki, logger = get_client_and_logger(host, port, log_level)
        run_deck_stats(anki, logger, decks)

    @app.command(name="invoke")
    def invoke(
        action: Annotated[str, typer.Argument(help="AnkiConnect action name")],
        params: Annotated[
            str | None,
            typer.Option("--params", "-p", help="Action parameters as a JSON object"),
        ] = None,
        host: HostOption = None,
        port: PortOption = None,
        log_level: LogLevelOption = "WARNING",
    ) -> None:
        """Invoke any AnkiConnect action and print the result as JSON."""
        parsed = parse_params(params)
        anki, logger = get_client_and_logger(host, port, log_level)
        run_invoke(anki, logger, action, parsed)
