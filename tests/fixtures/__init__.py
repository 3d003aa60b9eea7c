"""Test fixtures package."""

from .fake_transport import FakeAsyncTransport, FakeTransport, err, ok

__all__ = [
    "FakeAsyncTransport",
    "FakeTransport",
    "err",
    "ok",
]
