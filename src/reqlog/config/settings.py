"""Configuration management with Pydantic Settings.

Environment variables are loaded from:
1. Environment variables (highest priority)
2. .env file (development)
3. Defaults (lowest priority)
"""

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging format."""

    JSON = "json"
    TEXT = "text"


class EmitMode(str, Enum):
    """How the lines of a handler log block reach the sink.

    BUFFERED collects a block and writes it in one locked pass when the
    handler returns, so concurrent blocks never interleave. STREAMING writes
    each line as soon as its phase runs. In BUFFERED mode a handler that never
    returns leaves no lines at all; use STREAMING to see the Start banner first.
    """

    BUFFERED = "buffered"
    STREAMING = "streaming"


class RequestLogSettings(BaseSettings):
    """Handler log block configuration."""

    model_config = SettingsConfigDict(env_prefix="REQUEST_LOG_")

    enabled: bool = Field(default=True, description="Emit log blocks for marked handlers")
    mode: EmitMode = Field(
        default=EmitMode.BUFFERED,
        description="Line emission mode; buffered writes nothing until the handler finishes",
    )
    placeholder: str = Field(
        default="<unserializable>",
        description="Substituted for arguments or results the encoder rejects",
    )
    max_value_length: int = Field(
        default=0,
        description="Truncate serialized values longer than this (0 = unlimited)",
    )

    @field_validator("max_value_length")
    @classmethod
    def validate_max_value_length(cls, v: int) -> int:
        """Reject negative limits."""
        if v < 0:
            raise ValueError("max_value_length must be >= 0")
        return v


class Settings(BaseSettings):
    """Main application settings.

    All settings can be overridden via environment variables.
    For nested settings, use the appropriate prefix (e.g., REQUEST_LOG_MODE).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="reqlog", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        alias="ENV",
        description="Deployment environment",
    )

    # Logging configuration
    log_level: LogLevel = Field(default=LogLevel.INFO, description="Logging level")
    log_format: LogFormat = Field(default=LogFormat.TEXT, description="Logging format")

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Server bind host")
    port: int = Field(default=8080, description="Server bind port")

    # Nested settings
    request_log: RequestLogSettings = Field(default_factory=RequestLogSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses LRU cache to avoid re-parsing environment variables.
    """
    return Settings()
