"""Service configuration management for Learn-Python API."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .. import __version__


class Config(BaseSettings):
    """Learn-Python API configuration.

    Values are read once at startup from the process environment (and an
    optional ``.env`` file). Variable names carry no prefix so the service
    honours the conventional ``HOST`` / ``PORT`` pair used by container
    platforms.
    """

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }

    host: str = Field(default="0.0.0.0", description="API host address")
    port: int = Field(default=8080, description="API port")
    app_version: str = Field(default=__version__, description="Reported application version")
    environment: str = Field(
        default="development",
        validation_alias="APP_ENV",
        description="Deployment environment name",
    )
    otel_exporter_otlp_endpoint: Optional[str] = Field(
        default=None, description="OTLP collector endpoint; tracing is skipped when unset"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase for logging compatibility."""
        return v.upper()

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables and .env files."""
        return cls()
