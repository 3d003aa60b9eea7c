"""AnkiConnect action clients.

``AnkiConnectClient`` blocks the calling thread for each round trip;
``AsyncAnkiConnectClient`` suspends the calling task instead. Both share
one ActionProtocol, so requests, decoding and error classification are
identical; pick one at composition time.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import cached_property
from types import TracebackType
from typing import TYPE_CHECKING, Any, Literal, TypeVar

from anki_bridge.anki.actions.card import CardActions
from anki_bridge.anki.actions.deck import DeckActions
from anki_bridge.anki.actions.graphical import GraphicalActions
from anki_bridge.anki.actions.misc import MiscActions
from anki_bridge.anki.actions.note import NoteActions
from anki_bridge.anki.actions.statistic import StatisticActions
from anki_bridge.anki.protocol import ActionProtocol
from anki_bridge.config import ANKI_CONNECT_VERSION
from anki_bridge.utils.logging import get_logger

if TYPE_CHECKING:
    from anki_bridge.anki.actions.base import AnkiRequest
    from anki_bridge.domain.interfaces.transport import IAsyncTransport, ITransport

logger = get_logger(__name__)

R = TypeVar("R")


class _FamiliesMixin:
    """Per-family facades bound to this client."""

    @cached_property
    def deck(self) -> DeckActions:
        return DeckActions(self)  # type: ignore[arg-type]

    @cached_property
    def card(self) -> CardActions:
        return CardActions(self)  # type: ignore[arg-type]

    @cached_property
    def gui(self) -> GraphicalActions:
        return GraphicalActions(self)  # type: ignore[arg-type]

    @cached_property
    def note(self) -> NoteActions:
        return NoteActions(self)  # type: ignore[arg-type]

    @cached_property
    def statistic(self) -> StatisticActions:
        return StatisticActions(self)  # type: ignore[arg-type]

    @cached_property
    def misc(self) -> MiscActions:
        return MiscActions(self)  # type: ignore[arg-type]


class AnkiConnectClient(_FamiliesMixin):
    """Blocking client for the AnkiConnect action protocol.

    Example:
        with AnkiConnectClient(HttpxTransport("http://127.0.0.1:8765")) as anki:
            stats = anki.deck.get_deck_stats(["Default"])
    """

    def __init__(
        self,
        transport: ITransport,
        *,
        api_key: str | None = None,
        version: int = ANKI_CONNECT_VERSION,
    ):
        """
        Initialize client.

        Args:
            transport: Blocking transport provider
            api_key: Optional AnkiConnect API key
            version: AnkiConnect API version
        """
        self._transport = transport
        self._protocol = ActionProtocol(version=version, api_key=api_key)
        logger.debug("anki_client_initialized", mode="blocking", version=version)

    def call(
        self,
        action: str,
        params: Mapping[str, Any] | None = None,
        result_type: Any = Any,
    ) -> Any:
        """
        Invoke an AnkiConnect action.

        Args:
            action: Action name
            params: Action parameters; None sends no ``params`` field
            result_type: Type the result is validated against

        Returns:
            Validated action result

        Raises:
            ClientError: TransportError, ProtocolError, ServerError or DecodeError
        """
        raw = self._transport.send(self._protocol.build_request(action, params))
        return self._protocol.parse_response(raw, action, result_type)

    def request(self, request: AnkiRequest[R]) -> R:
        """Invoke the action described by a request model."""
        return self.call(request.action, request.to_params(), request.result_type)  # type: ignore[no-any-return]

    def close(self) -> None:
        """Close the underlying transport."""
        self._transport.close()

    def __enter__(self) -> AnkiConnectClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False


class AsyncAnkiConnectClient(_FamiliesMixin):
    """Async client for the AnkiConnect action protocol.

    Example:
        async with AsyncAnkiConnectClient(AsyncHttpxTransport(url)) as anki:
            stats = await anki.deck.get_deck_stats(["Default"])
    """

    def __init__(
        self,
        transport: IAsyncTransport,
        *,
        api_key: str | None = None,
        version: int = ANKI_CONNECT_VERSION,
    ):
        """
        Initialize client.

        Args:
            transport: Suspending transport provider
            api_key: Optional AnkiConnect API key
            version: AnkiConnect API version
        """
        self._transport = transport
        self._protocol = ActionProtocol(version=version, api_key=api_key)
        logger.debug("anki_client_initialized", mode="async", version=version)

    async def call(
        self,
        action: str,
        params: Mapping[str, Any] | None = None,
        result_type: Any = Any,
    ) -> Any:
        """Invoke an AnkiConnect action; see ``AnkiConnectClient.call``."""
        raw = await self._transport.send(self._protocol.build_request(action, params))
        return self._protocol.parse_response(raw, action, result_type)

    async def request(self, request: AnkiRequest[R]) -> R:
        """Invoke the action described by a request model."""
        return await self.call(  # type: ignore[no-any-return]
            request.action, request.to_params(), request.result_type
        )

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self._transport.aclose()

    async def __aenter__(self) -> AsyncAnkiConnectClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        await self.aclose()
        return False
