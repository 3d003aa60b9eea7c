"""Compose clients from settings.

The factories are the only place where a transport is chosen for a
client; everything after that point is transport-agnostic.
"""

from anki_bridge.anki.client import AnkiConnectClient, AsyncAnkiConnectClient
from anki_bridge.anki.services.http_transport import AsyncHttpxTransport, HttpxTransport
from anki_bridge.config import AnkiConnectSettings, load_settings
from anki_bridge.utils.logging import get_logger

logger = get_logger(__name__)


def create_client(settings: AnkiConnectSettings | None = None) -> AnkiConnectClient:
    """Create a blocking client over httpx.

    Args:
        settings: Endpoint settings; loaded from the environment when omitted

    Returns:
        Client owning its transport; close it or use it as a context manager

    Raises:
        ConfigurationError: If settings are loaded and fail validation

    Examples:
        >>> with create_client() as anki:
        ...     anki.deck.deck_names()
    """
    settings = settings or load_settings()
    logger.debug("creating_anki_client", url=settings.url, mode="blocking")
    return AnkiConnectClient(
        HttpxTransport(settings.url, timeout=settings.timeout),
        api_key=settings.api_key_value(),
        version=settings.version,
    )


def create_async_client(
    settings: AnkiConnectSettings | None = None,
) -> AsyncAnkiConnectClient:
    """Create an async client over httpx; see ``create_client``."""
    settings = settings or load_settings()
    logger.debug("creating_anki_client", url=settings.url, mode="async")
    return AsyncAnkiConnectClient(
        AsyncHttpxTransport(settings.url, timeout=settings.timeout),
        api_key=settings.api_key_value(),
        version=settings.version,
    )
