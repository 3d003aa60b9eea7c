"""Request/response envelope shared by every AnkiConnect action.

Request:  {"action": str, "version": int, "params"?: object, "key"?: str}
Response: {"result": any, "error": str | null}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from anki_bridge.exceptions import ClientError, ErrorKind, classify_error


@dataclass(frozen=True)
class RequestEnvelope:
    """Decoded form of a request body."""

    action: str
    version: int
    params: dict[str, Any] | None = None
    key: str | None = None


@dataclass(frozen=True)
class ResponseEnvelope:
    """Decoded form of a response body.

    ``error`` is None for a successful call; ``result`` may then be None
    for actions that return nothing.
    """

    result: Any
    error: str | None

    @property
    def is_error(self) -> bool:
        return self.error is not None


def encode_request(
    action: str,
    version: int,
    params: Mapping[str, Any] | None = None,
    key: str | None = None,
) -> bytes:
    """Serialize an action call into request bytes.

    ``params`` is omitted entirely when None. An empty mapping is sent as
    ``{}`` because AnkiConnect treats the two differently for some actions.
    """
    body: dict[str, Any] = {"action": action, "version": version}
    if params is not None:
        body["params"] = dict(params)
    if key is not None:
        body["key"] = key
    return json.dumps(body, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_request(data: bytes) -> RequestEnvelope:
    """Parse request bytes produced by ``encode_request``."""
    body = json.loads(data)
    return RequestEnvelope(
        action=body["action"],
        version=body["version"],
        params=body.get("params"),
        key=body.get("key"),
    )


def _violation(message: str, action: str | None, **context: Any) -> ClientError:
    return classify_error(ErrorKind.PROTOCOL, message, action=action, context=context)


def decode_response(data: bytes, *, action: str | None = None) -> ResponseEnvelope:
    """Parse response bytes into a ResponseEnvelope.

    Unknown top-level keys are ignored.

    Args:
        data: Raw response body
        action: Action name, only used for error context

    Returns:
        The decoded envelope

    Raises:
        ProtocolError: If the body is not a valid result/error envelope
    """
    try:
        body = json.loads(data)
    except (ValueError, UnicodeDecodeError, RecursionError) as e:
        raise _violation(f"invalid JSON ({e})", action) from e

    if not isinstance(body, dict):
        raise _violation(
            f"expected a JSON object, got {type(body).__name__}", action
        )

    has_result = "result" in body
    has_error = "error" in body
    if not has_result and not has_error:
        raise _violation("missing both 'result' and 'error'", action, keys=sorted(body))

    error = body.get("error")
    result = body.get("result")

    if error is not None and not isinstance(error, str):
        raise _violation(
            f"'error' must be a string or null, got {type(error).__name__}", action
        )
    if error is not None and result is not None:
        raise _violation("both 'result' and 'error' are set", action)

    return ResponseEnvelope(result=result, error=error)
