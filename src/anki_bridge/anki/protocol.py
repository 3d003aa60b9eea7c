"""Transport-independent half of every AnkiConnect call.

Both clients run the same pipeline; only the transport call in the middle
differs:

    build_request -> transport.send -> parse_response
"""

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from anki_bridge.anki.envelope import decode_response, encode_request
from anki_bridge.config import ANKI_CONNECT_VERSION
from anki_bridge.exceptions import ErrorKind, classify_error
from anki_bridge.utils.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=256)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


class ActionProtocol:
    """Encodes calls and turns responses into typed results or errors.

    Holds only immutable configuration, so one instance can serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        version: int = ANKI_CONNECT_VERSION,
        api_key: str | None = None,
    ):
        """
        Initialize protocol.

        Args:
            version: AnkiConnect API version placed in every envelope
            api_key: Key sent as top-level ``key`` when the add-on requires one
        """
        self.version = version
        self._api_key = api_key

    def build_request(
        self, action: str, params: Mapping[str, Any] | None = None
    ) -> bytes:
        """Encode one call; ``params=None`` omits the field on the wire."""
        logger.debug(
            "anki_request_sent", action=action, has_params=params is not None
        )
        return encode_request(action, self.version, params, key=self._api_key)

    def parse_response(
        self, raw: bytes, action: str, result_type: Any = Any
    ) -> Any:
        """Decode a response body into the action's result type.

        Args:
            raw: Response body from the transport
            action: Action name, for error context
            result_type: Type the ``result`` field must validate against

        Returns:
            The validated result

        Raises:
            ProtocolError: Body is not a valid envelope
            ServerError: AnkiConnect reported an error
            DecodeError: ``result`` does not match ``result_type``; values are
                never coerced, so ``"7"`` is not accepted for an int
        """
        envelope = decode_response(raw, action=action)
        if envelope.error is not None:
            raise classify_error(ErrorKind.SERVER, envelope.error, action=action)

        try:
            result = _adapter(result_type).validate_python(envelope.result, strict=True)
        except ValidationError as e:
            raise classify_error(
                ErrorKind.DECODE,
                e,
                action=action,
                context={"error_count": e.error_count()},
            ) from e

        logger.debug("anki_response_received", action=action)
        return result
