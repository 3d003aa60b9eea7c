"""Centralized exception hierarchy for anki-bridge.

Every failure of an AnkiConnect exchange reaches the caller as exactly one
of the classified errors below. All custom exceptions inherit from
AnkiBridgeError, making it easy to catch everything with a single clause.

Exception Hierarchy:
    AnkiBridgeError (base)
     ConfigurationError - Settings loading/validation errors
     ClientError - Failed AnkiConnect exchange (carries an ErrorKind)
        TransportError - Network/connection failure, timeout, HTTP status
        ProtocolError - Response is not a well-formed envelope
        ServerError - AnkiConnect returned a non-null ``error`` string
        DecodeError - ``result`` does not match the action's result type

Usage Examples:
    # Catch every failed call
    try:
        stats = decks.get_deck_stats(["Default"])
    except ClientError as e:
        logger.error("deck_stats_failed", **e.to_dict())

    # Show the add-on's own message
    try:
        decks.create_deck("")
    except ServerError as e:
        print(e.upstream_message)
"""

from enum import Enum
from typing import Any, ClassVar

from .error_codes import ErrorCode


class ErrorKind(str, Enum):
    """Origin of a failed AnkiConnect exchange."""

    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    SERVER = "server"
    DECODE = "decode"


class AnkiBridgeError(Exception):
    """Base exception for all anki-bridge errors.

    Attributes:
        message: Human-readable error message
        suggestion: Optional suggestion for resolving the error
        error_code: Structured error code for machine-readable handling
        context: Additional context for debugging (e.g., action, url)
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            suggestion: Optional suggestion for resolving the error
            error_code: Structured error code (e.g., "ANK-CONN-001")
            context: Additional context for debugging
        """
        self.message = message
        self.suggestion = suggestion
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with error code and suggestion if available."""
        parts = []
        if self.error_code:
            parts.append(f"[{self.error_code}] {self.message}")
        else:
            parts.append(self.message)
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging.

        Returns:
            Dictionary with error details
        """
        return {
            "message": self.message,
            "error_code": self.error_code,
            "suggestion": self.suggestion,
            "context": self.context,
            "type": type(self).__name__,
        }


class ConfigurationError(AnkiBridgeError):
    """Settings loading or validation errors.

    Raised when:
    - Environment variables or .env values fail validation
    - Host, port or timeout are out of range
    """


class ClientError(AnkiBridgeError):
    """A single AnkiConnect call failed.

    Subclasses fix ``kind``; callers can branch on the class or on
    ``error.kind`` interchangeably.
    """

    kind: ClassVar[ErrorKind]

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["kind"] = self.kind.value
        return data


class TransportError(ClientError):
    """AnkiConnect could not be reached.

    Raised when:
    - Connection is refused (Anki is not running)
    - Host name or local port cannot be resolved/bound
    - The provider's timeout expired
    - The endpoint answered with a non-2xx HTTP status
    """

    kind = ErrorKind.TRANSPORT


class ProtocolError(ClientError):
    """The response body violates the envelope contract.

    Raised when:
    - The body is not valid JSON or not a JSON object
    - Neither ``result`` nor ``error`` is present
    - Both a non-null ``result`` and a non-null ``error`` are present
    - ``error`` is not a string
    """

    kind = ErrorKind.PROTOCOL


class ServerError(ClientError):
    """AnkiConnect reported an error for the action.

    Attributes:
        upstream_message: The ``error`` string exactly as the add-on sent it
    """

    kind = ErrorKind.SERVER

    def __init__(
        self,
        upstream_message: str,
        *,
        suggestion: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        self.upstream_message = upstream_message
        super().__init__(upstream_message, suggestion, error_code, context)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["upstream_message"] = self.upstream_message
        return data


class DecodeError(ClientError):
    """The ``result`` payload does not fit the action's result type."""

    kind = ErrorKind.DECODE


_ERROR_CLASSES: dict[ErrorKind, type[ClientError]] = {
    ErrorKind.TRANSPORT: TransportError,
    ErrorKind.PROTOCOL: ProtocolError,
    ErrorKind.SERVER: ServerError,
    ErrorKind.DECODE: DecodeError,
}

_DEFAULT_CODES: dict[ErrorKind, ErrorCode] = {
    ErrorKind.TRANSPORT: ErrorCode.ANK_CONNECTION_FAILED,
    ErrorKind.PROTOCOL: ErrorCode.ANK_MALFORMED_ENVELOPE,
    ErrorKind.SERVER: ErrorCode.ANK_SERVER_ERROR,
    ErrorKind.DECODE: ErrorCode.ANK_RESULT_MISMATCH,
}

_SUGGESTIONS: dict[ErrorKind, str | None] = {
    ErrorKind.TRANSPORT: (
        "Ensure Anki is running. "
        "Check AnkiConnect addon is installed and enabled. "
        "Check firewall settings allow the connection."
    ),
    ErrorKind.PROTOCOL: (
        "Verify the URL points at AnkiConnect and that the addon "
        "supports API version 6."
    ),
    ErrorKind.SERVER: None,
    ErrorKind.DECODE: "Check that the installed AnkiConnect version supports this action.",
}


def _describe(kind: ErrorKind, payload: Any) -> str:
    if kind is ErrorKind.SERVER:
        return payload if isinstance(payload, str) else str(payload)
    if isinstance(payload, BaseException):
        detail = str(payload) or type(payload).__name__
    else:
        detail = str(payload)
    prefixes = {
        ErrorKind.TRANSPORT: "Cannot reach AnkiConnect",
        ErrorKind.PROTOCOL: "Malformed AnkiConnect response",
        ErrorKind.DECODE: "Unexpected result shape",
    }
    return f"{prefixes[kind]}: {detail}"


def classify_error(
    kind: ErrorKind,
    payload: Any,
    *,
    action: str | None = None,
    error_code: ErrorCode | None = None,
    context: dict[str, Any] | None = None,
) -> ClientError:
    """Map a failure origin and its payload to a structured error.

    Pure and total: every ``kind`` yields exactly one ``ClientError``
    subclass. The error is returned, not raised.

    Args:
        kind: Where the failure happened
        payload: Transport exception, protocol violation description,
            verbatim server message, or result validation error
        action: AnkiConnect action name, when known
        error_code: Overrides the default code for ``kind``
        context: Extra debugging context merged into the error's context

    Returns:
        The classified error
    """
    error_context: dict[str, Any] = dict(context or {})
    if action is not None:
        error_context["action"] = action
    if isinstance(payload, BaseException):
        error_context.setdefault("cause", type(payload).__name__)

    code = (error_code or _DEFAULT_CODES[kind]).value
    suggestion = _SUGGESTIONS[kind]

    return _ERROR_CLASSES[kind](
        _describe(kind, payload),
        suggestion=suggestion,
        error_code=code,
        context=error_context,
    )


def get_exception_hierarchy() -> dict[str, list[str]]:
    """Get the exception hierarchy as a dictionary.

    Returns:
        Dictionary mapping base exceptions to their subclasses
    """
    return {
        "AnkiBridgeError": ["ConfigurationError", "ClientError"],
        "ClientError": [
            "TransportError",
            "ProtocolError",
            "ServerError",
            "DecodeError",
        ],
    }
