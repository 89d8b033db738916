"""Application configuration.

Loads settings from environment variables (prefixed ``CATALOG_``) with
sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Local catalog
    catalog_seed: int | None = None
    catalog_size: int = Field(default=200, ge=0)

    # Remote catalog (plaintext gRPC)
    grpc_host: str = "dotnet-app"
    grpc_port: int = Field(default=8085, gt=0, le=65535)
    grpc_connect_timeout: float = Field(default=5.0, gt=0)
    grpc_call_timeout: float = Field(default=30.0, gt=0)
    grpc_shutdown_grace: float = Field(default=1.0, ge=0)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True


settings = Settings()


def get_settings() -> Settings:
    """Get the settings singleton.

    Returns:
        Settings instance.
    """
    return settings
