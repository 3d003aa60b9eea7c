"""Miscellaneous actions."""

from __future__ import annotations

from typing import Any, ClassVar

from .base import ActionFamily, AnkiRequest, Outcome


class VersionRequest(AnkiRequest[int]):
    action: ClassVar[str] = "version"
    result_type: ClassVar[Any] = int


class MiscActions(ActionFamily):
    """Add-on level operations."""

    def version(self) -> Outcome[int]:
        """API version implemented by the running AnkiConnect add-on."""
        return self._client.request(VersionRequest())
