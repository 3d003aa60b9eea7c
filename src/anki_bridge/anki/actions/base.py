"""Base types shared by all action families."""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Any, ClassVar, Generic, Protocol, TypeAlias, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

R = TypeVar("R")

# Family methods return the result directly from a blocking client and an
# awaitable from the async client.
Outcome: TypeAlias = R | Awaitable[R]


class AnkiRequest(BaseModel, Generic[R]):
    """Parameters of one AnkiConnect action plus its fixed name and result type.

    Subclasses set ``action`` and ``result_type`` and declare their params
    as fields (snake_case in Python, camelCase on the wire). A subclass
    without fields is sent with no ``params`` key at all.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    action: ClassVar[str]
    result_type: ClassVar[Any] = Any

    def to_params(self) -> dict[str, Any] | None:
        """Wire ``params`` object, or None when the action takes none."""
        if not type(self).model_fields:
            return None
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AnkiResult(BaseModel):
    """Result record with camelCase wire names; unknown keys are ignored."""

    # Anki records carry a ``modelName`` (note type), hence no "model_" guard.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )


class SupportsRequest(Protocol):
    """Anything that can execute an AnkiRequest (blocking or async client)."""

    def request(self, request: AnkiRequest[Any]) -> Any: ...


class ActionFamily:
    """Facade base: binds a family's operations to one client."""

    def __init__(self, client: SupportsRequest):
        self._client = client
