"""Settings for reaching the AnkiConnect endpoint."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .error_codes import ErrorCode
from .exceptions import ConfigurationError

# Protocol version spoken by this client; the add-on rejects others.
ANKI_CONNECT_VERSION = 6

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765


class AnkiConnectSettings(BaseSettings):
    """AnkiConnect endpoint configuration using pydantic-settings.

    Values come from keyword arguments, ``ANKI_CONNECT_*`` environment
    variables or a ``.env`` file, in that order of precedence.
    """

    model_config = SettingsConfigDict(
        env_prefix="ANKI_CONNECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    scheme: Literal["http", "https"] = Field(
        default="http", description="URL scheme of the endpoint"
    )
    host: str = Field(default=DEFAULT_HOST, description="AnkiConnect host")
    port: int = Field(
        default=DEFAULT_PORT, ge=1, le=65535, description="AnkiConnect port"
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="Key sent with every request when AnkiConnect requires one",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Transport timeout in seconds; unset means wait indefinitely",
    )
    version: Literal[6] = Field(
        default=ANKI_CONNECT_VERSION, description="AnkiConnect API version"
    )

    @field_validator("host", mode="before")
    @classmethod
    def strip_host(cls, v: Any) -> Any:
        """Reject blank hosts and surrounding whitespace."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                msg = "host must not be empty"
                raise ValueError(msg)
        return v

    @property
    def url(self) -> str:
        """Endpoint URL built from scheme, host and port."""
        host = f"[{self.host}]" if ":" in self.host else self.host
        return f"{self.scheme}://{host}:{self.port}"

    def api_key_value(self) -> str | None:
        """Return the plain API key, if configured."""
        if self.api_key is None:
            return None
        return self.api_key.get_secret_value() or None


def load_settings(**overrides: Any) -> AnkiConnectSettings:
    """Build settings, converting validation failures to ConfigurationError.

    Args:
        **overrides: Explicit values that take precedence over the environment

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If any value fails validation
    """
    try:
        return AnkiConnectSettings(**overrides)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        msg = f"Invalid AnkiConnect settings: {e.error_count()} error(s)"
        raise ConfigurationError(
            msg,
            suggestion=(
                "Check ANKI_CONNECT_HOST, ANKI_CONNECT_PORT and "
                "ANKI_CONNECT_TIMEOUT values."
            ),
            error_code=ErrorCode.CFG_INVALID.value,
            context={"fields": fields},
        ) from e
