"""Domain interfaces package."""

from .transport import IAsyncTransport, ITransport

__all__ = [
    "IAsyncTransport",
    "ITransport",
]
