"""Concrete transport providers."""

from .http_transport import AsyncHttpxTransport, HttpxTransport

__all__ = [
    "AsyncHttpxTransport",
    "HttpxTransport",
]
