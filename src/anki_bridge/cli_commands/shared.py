"""Shared utilities for CLI commands."""

from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from anki_bridge.anki.client import AnkiConnectClient
from anki_bridge.anki.factory import create_client
from anki_bridge.config import load_settings
from anki_bridge.exceptions import AnkiBridgeError
from anki_bridge.utils.logging import configure_logging, get_logger

# Shared console for all commands
console = Console()


def get_client_and_logger(
    host: str | None = None,
    port: int | None = None,
    log_level: str = "WARNING",
) -> tuple[AnkiConnectClient, Any]:
    """Configure logging and build a client from settings plus CLI overrides.

    Args:
        host: Overrides ANKI_CONNECT_HOST when given
        port: Overrides ANKI_CONNECT_PORT when given
        log_level: Console log level

    Returns:
        Tuple of (client, logger)

    Raises:
        typer.Exit: If the settings are invalid
    """
    configure_logging(log_level)
    logger = get_logger("cli")

    overrides: dict[str, Any] = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port

    try:
        settings = load_settings(**overrides)
    except AnkiBridgeError as e:
        fail(e, logger, "load_settings_failed")

    logger.debug("cli_settings_loaded", url=settings.url)
    return create_client(settings), logger


def fail(error: AnkiBridgeError, logger: Any, event: str) -> NoReturn:
    """Report a classified error and exit with code 1."""
    logger.error(event, **error.to_dict())
    console.print(f"\n[bold red]Error:[/bold red] {escape(str(error))}")
    raise typer.Exit(code=1)
