"""AnkiConnect clients, actions and transports."""

from .client import AnkiConnectClient, AsyncAnkiConnectClient
from .factory import create_async_client, create_client
from .protocol import ActionProtocol

__all__ = [
    "ActionProtocol",
    "AnkiConnectClient",
    "AsyncAnkiConnectClient",
    "create_async_client",
    "create_client",
]
