"""Interfaces for delivering AnkiConnect request bytes."""

from abc import ABC, abstractmethod


class ITransport(ABC):
    """Blocking transport: returns once the exchange has completed.

    Implementations never retry and raise TransportError on any failure
    to obtain a 2xx response body.
    """

    @abstractmethod
    def send(self, request: bytes) -> bytes:
        """Deliver an encoded request and return the raw response body.

        Args:
            request: Encoded request envelope

        Returns:
            Raw response bytes

        Raises:
            TransportError: If the endpoint could not be reached
        """

    @abstractmethod
    def close(self) -> None:
        """Release network resources owned by the transport."""


class IAsyncTransport(ABC):
    """Suspending transport: awaits the exchange without blocking the loop."""

    @abstractmethod
    async def send(self, request: bytes) -> bytes:
        """Deliver an encoded request and return the raw response body.

        Args:
            request: Encoded request envelope

        Returns:
            Raw response bytes

        Raises:
            TransportError: If the endpoint could not be reached
        """

    @abstractmethod
    async def aclose(self) -> None:
        """Release network resources owned by the transport."""
