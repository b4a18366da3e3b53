"""12-factor configuration adapter using environment variables and an optional .env file."""

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from room_worker.domain.errors import ConfigurationError


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LiveKit (room listing) configuration
    livekit_host: str | None = Field(
        default=None, description="LiveKit server URL (http(s):// or ws(s)://)"
    )
    livekit_api_key: str | None = Field(default=None, description="LiveKit API key")
    livekit_api_key_secret: SecretStr | None = Field(
        default=None, description="LiveKit API secret"
    )

    # EMQX (listener count) configuration
    emqx_host: str | None = Field(default=None, description="EMQX management API host")
    emqx_port: int = Field(default=18083, description="EMQX management API port")
    emqx_scheme: str = Field(default="http", description="Scheme for the EMQX API: 'http' or 'https'")
    emqx_api_key: str | None = Field(
        default=None, description="EMQX API key (Basic auth username)"
    )
    emqx_api_secret: SecretStr | None = Field(
        default=None, description="EMQX API secret (Basic auth password)"
    )
    listener_topic_template: str = Field(
        default="room/{name}/listener",
        description="Broker topic holding a room's listeners; '{name}' is the room name",
    )
    listener_lookup_timeout_seconds: float = Field(
        default=5.0, description="Timeout for a single listener count request in seconds"
    )

    # Store configuration
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy async database URL, e.g. postgresql+asyncpg://user:pw@host/db",
    )
    rooms_table: str = Field(default="Room", description="Table holding the room counts")
    room_store_mode: str = Field(
        default="upsert",
        description="'upsert' creates missing rooms, 'update' only updates existing rows",
    )

    # Run behaviour
    max_concurrency: int = Field(
        default=4, description="Maximum number of rooms reconciled concurrently (1 = sequential)"
    )
    fail_on_partial_failure: bool = Field(
        default=False,
        description="Exit with a non-zero status if any room failed to reconcile",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("emqx_scheme")
    @classmethod
    def validate_emqx_scheme(cls, v: str) -> str:
        """Validate scheme is either 'http' or 'https'."""
        if v.lower() not in ("http", "https"):
            raise ValueError("emqx_scheme must be either 'http' or 'https'")
        return v.lower()

    @field_validator("room_store_mode")
    @classmethod
    def validate_room_store_mode(cls, v: str) -> str:
        """Validate store mode is either 'upsert' or 'update'."""
        if v.lower() not in ("upsert", "update"):
            raise ValueError("room_store_mode must be either 'upsert' or 'update'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()

    @field_validator("max_concurrency")
    @classmethod
    def validate_max_concurrency(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_concurrency must be at least 1")
        return v

    @field_validator("listener_lookup_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("listener_lookup_timeout_seconds must be positive")
        return v

    @field_validator("listener_topic_template")
    @classmethod
    def validate_topic_template(cls, v: str) -> str:
        if "{name}" not in v:
            raise ValueError("listener_topic_template must contain '{name}'")
        return v

    @property
    def livekit_http_url(self) -> str | None:
        """LiveKit URL with websocket schemes mapped to their HTTP equivalents."""
        if not self.livekit_host:
            return None
        if self.livekit_host.startswith("wss://"):
            return "https://" + self.livekit_host[len("wss://") :]
        if self.livekit_host.startswith("ws://"):
            return "http://" + self.livekit_host[len("ws://") :]
        return self.livekit_host

    @property
    def emqx_base_url(self) -> str:
        return f"{self.emqx_scheme}://{self.emqx_host}:{self.emqx_port}"

    def _missing(self, names: tuple[str, ...]) -> list[str]:
        return [name.upper() for name in names if not getattr(self, name)]

    def require_livekit(self) -> None:
        """Raise ConfigurationError unless the LiveKit settings are present."""
        missing = self._missing(("livekit_host", "livekit_api_key", "livekit_api_key_secret"))
        if missing:
            raise ConfigurationError(missing)

    def require_all(self) -> None:
        """Raise ConfigurationError unless every setting a full run needs is present."""
        missing = self._missing(
            (
                "livekit_host",
                "livekit_api_key",
                "livekit_api_key_secret",
                "emqx_host",
                "emqx_api_key",
                "emqx_api_secret",
                "database_url",
            )
        )
        if missing:
            raise ConfigurationError(missing)
