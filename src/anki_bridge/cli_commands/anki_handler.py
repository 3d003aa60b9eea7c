"""Handlers for the AnkiConnect CLI commands."""

from __future__ import annotations

import json
from typing import Any

import typer
from rich.markup import escape
from rich.table import Table

from anki_bridge import __version__
from anki_bridge.anki.client import AnkiConnectClient
from anki_bridge.exceptions import AnkiBridgeError

from .shared import console, fail


def run_version(anki: AnkiConnectClient, logger: Any) -> None:
    """Print the client version and the API version reported by AnkiConnect.

    Raises:
        typer.Exit: On failure
    """
    try:
        with anki:
            api_version = anki.misc.version()
    except AnkiBridgeError as e:
        fail(e, logger, "version_failed")

    console.print(f"anki-bridge {__version__}")
    console.print(f"AnkiConnect API version: [cyan]{api_version}[/cyan]")


def run_list_decks(anki: AnkiConnectClient, logger: Any) -> None:
    """Execute the list-decks operation.

    Args:
        anki: Client to query
        logger: Logger instance

    Raises:
        typer.Exit: On list-decks failure
    """
    logger.info("list_decks_started")

    try:
        with anki:
            decks = sorted(anki.deck.deck_names())
    except AnkiBridgeError as e:
        fail(e, logger, "list_decks_failed")

    if not decks:
        console.print("[yellow]No decks available.[/yellow]")
    else:
        console.print("\n[bold]Decks:[/bold]")
        for deck in decks:
            console.print(f"  [cyan]• {escape(deck)}[/cyan]")

    logger.info("list_decks_completed", count=len(decks))


def run_deck_stats(anki: AnkiConnectClient, logger: Any, decks: list[str]) -> None:
    """Print card counts for the given decks as a table.

    Raises:
        typer.Exit: On failure
    """
    logger.info("deck_stats_started", decks=decks)

    try:
        with anki:
            stats = anki.deck.get_deck_stats(decks)
    except AnkiBridgeError as e:
        fail(e, logger, "deck_stats_failed")

    table = Table(title="Deck statistics")
    table.add_column("Deck", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("New", justify="right", style="blue")
    table.add_column("Learning", justify="right", style="red")
    table.add_column("Review", justify="right", style="green")

    for key, deck_stats in stats.items():
        table.add_row(
            escape(deck_stats.name or key),
            str(deck_stats.total_in_deck),
            str(deck_stats.new_count),
            str(deck_stats.learn_count),
            str(deck_stats.review_count),
        )

    console.print(table)
    logger.info("deck_stats_completed", count=len(stats))


def parse_params(raw: str | None) -> dict[str, Any] | None:
    """Parse the ``--params`` option into a JSON object.

    Raises:
        typer.BadParameter: If the value is not a JSON object
    """
    if raw is None:
        return None
    try:
        params = json.loads(raw)
    except json.JSONDecodeError as e:
        msg = f"not valid JSON: {e.msg}"
        raise typer.BadParameter(msg, param_hint="--params") from e
    if not isinstance(params, dict):
        msg = "must be a JSON object"
        raise typer.BadParameter(msg, param_hint="--params")
    return params


def run_invoke(
    anki: AnkiConnectClient,
    logger: Any,
    action: str,
    params: dict[str, Any] | None,
) -> None:
    """Invoke any action and print its raw result as JSON.

    Raises:
        typer.Exit: On failure
    """
    logger.info("invoke_started", action=action)

    try:
        with anki:
            result = anki.call(action, params)
    except AnkiBridgeError as e:
        fail(e, logger, "invoke_failed")

    console.print_json(data=result)
    logger.info("invoke_completed", action=action)
