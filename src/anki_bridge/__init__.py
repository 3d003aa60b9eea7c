"""Typed client for the AnkiConnect add-on."""

from .anki import (
    AnkiConnectClient,
    AsyncAnkiConnectClient,
    create_async_client,
    create_client,
)
from .anki.services import AsyncHttpxTransport, HttpxTransport
from .config import AnkiConnectSettings, load_settings
from .exceptions import (
    AnkiBridgeError,
    ClientError,
    ConfigurationError,
    DecodeError,
    ErrorKind,
    ProtocolError,
    ServerError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "AnkiBridgeError",
    "AnkiConnectClient",
    "AnkiConnectSettings",
    "AsyncAnkiConnectClient",
    "AsyncHttpxTransport",
    "ClientError",
    "ConfigurationError",
    "DecodeError",
    "ErrorKind",
    "HttpxTransport",
    "ProtocolError",
    "ServerError",
    "TransportError",
    "create_async_client",
    "create_client",
    "load_settings",
    "__version__",
]
