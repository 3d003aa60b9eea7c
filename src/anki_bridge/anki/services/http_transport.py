"""httpx-backed transports for AnkiConnect communication."""

from types import TracebackType
from typing import Literal

import httpx

from anki_bridge.domain.interfaces.transport import IAsyncTransport, ITransport
from anki_bridge.error_codes import ErrorCode
from anki_bridge.exceptions import ClientError, ErrorKind, classify_error
from anki_bridge.utils.logging import get_logger

logger = get_logger(__name__)

_HEADERS = {"Content-Type": "application/json"}


def _transport_error(url: str, error: httpx.HTTPError) -> ClientError:
    """Map an httpx failure to a TransportError with a specific code."""
    context: dict[str, object] = {"url": url}
    if isinstance(error, httpx.TimeoutException):
        code = ErrorCode.ANK_TIMEOUT
    elif isinstance(error, httpx.HTTPStatusError):
        code = ErrorCode.ANK_HTTP_STATUS
        context["status_code"] = error.response.status_code
    else:
        code = ErrorCode.ANK_CONNECTION_FAILED
    return classify_error(ErrorKind.TRANSPORT, error, error_code=code, context=context)


def _build_timeout(timeout: float | None) -> httpx.Timeout:
    # httpx defaults to 5s; None here means no client-side limit at all.
    return httpx.Timeout(timeout)


class HttpxTransport(ITransport):
    """Blocking transport over ``httpx.Client``.

    Posts each request once; there is no retry and no health checking.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ):
        """
        Initialize transport.

        Args:
            url: AnkiConnect URL
            timeout: Request timeout in seconds, None to wait indefinitely
            client: Optional pre-configured client; it is borrowed, not closed
        """
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=_build_timeout(timeout),
            transport=httpx.HTTPTransport(retries=0),
        )
        logger.debug("anki_transport_initialized", url=url, mode="blocking")

    def send(self, request: bytes) -> bytes:
        try:
            response = self._client.post(self.url, content=request, headers=_HEADERS)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise _transport_error(self.url, e) from e
        return response.content

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            self._client.close()
            logger.debug("anki_transport_closed", url=self.url)

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        self.close()
        return False


class AsyncHttpxTransport(IAsyncTransport):
    """Suspending transport over ``httpx.AsyncClient``."""

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize transport.

        Args:
            url: AnkiConnect URL
            timeout: Request timeout in seconds, None to wait indefinitely
            client: Optional pre-configured client; it is borrowed, not closed
        """
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=_build_timeout(timeout),
            transport=httpx.AsyncHTTPTransport(retries=0),
        )
        logger.debug("anki_transport_initialized", url=url, mode="async")

    async def send(self, request: bytes) -> bytes:
        try:
            response = await self._client.post(
                self.url, content=request, headers=_HEADERS
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise _transport_error(self.url, e) from e
        return response.content

    async def aclose(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("anki_transport_closed", url=self.url)

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> Literal[False]:
        await self.aclose()
        return False
