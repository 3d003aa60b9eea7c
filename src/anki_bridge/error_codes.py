"""Structured error codes for machine-readable error handling.

Error codes follow the format: {DOMAIN}-{CATEGORY}-{NUMBER}

Error Domains:
    ANK - AnkiConnect exchange errors (transport, envelope, server, result)
    CFG - Configuration errors

Usage:
    from anki_bridge.error_codes import ErrorCode

    try:
        client.request(GetDeckStatsRequest(decks=["Default"]))
    except ClientError as e:
        if e.error_code == ErrorCode.ANK_SERVER_ERROR.value:
            ...
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes for machine-readable handling.

    All error codes inherit from str for JSON serialization compatibility.
    Format: {DOMAIN}-{CATEGORY}-{NUMBER}
    """

    # =========================================================================
    # AnkiConnect Errors (ANK-xxx-xxx)
    # =========================================================================
    ANK_CONNECTION_FAILED = "ANK-CONN-001"
    """Could not reach AnkiConnect (refused, DNS, local port)."""

    ANK_TIMEOUT = "ANK-CONN-002"
    """The transport gave up waiting for AnkiConnect."""

    ANK_HTTP_STATUS = "ANK-HTTP-001"
    """AnkiConnect answered with a non-2xx HTTP status."""

    ANK_MALFORMED_ENVELOPE = "ANK-PROTO-001"
    """Response body is not a well-formed result/error envelope."""

    ANK_SERVER_ERROR = "ANK-SERVER-001"
    """AnkiConnect reported a non-null error string."""

    ANK_RESULT_MISMATCH = "ANK-DECODE-001"
    """Result payload does not match the action's result type."""

    # =========================================================================
    # Configuration Errors (CFG-xxx-xxx)
    # =========================================================================
    CFG_INVALID = "CFG-INVALID-001"
    """Configuration validation failed."""


def get_error_domain(code: ErrorCode) -> str:
    """Extract the domain from an error code.

    Args:
        code: The error code

    Returns:
        The domain prefix (e.g., "ANK", "CFG")
    """
    return code.value.split("-")[0]


def get_error_severity(code: ErrorCode) -> str:
    """Get the severity level for an error code.

    Args:
        code: The error code

    Returns:
        Severity level: "critical" or "error"
    """
    critical_codes = {
        ErrorCode.CFG_INVALID,
        ErrorCode.ANK_MALFORMED_ENVELOPE,
    }
    if code in critical_codes:
        return "critical"
    return "error"
