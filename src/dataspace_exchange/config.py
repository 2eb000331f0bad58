"""Application settings."""

from enum import StrEnum

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RepositoryBackend(StrEnum):
    """Available persistence adapters for data exchange records."""

    IN_MEMORY = "in_memory"
    POSTGRES = "postgres"


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    app_name: str = "Dataspace Exchange"
    api_prefix: str = ""
    host: str = "0.0.0.0"
    port: int = 8080
    connector_endpoint: str | None = None
    contract_uri: str | None = None
    catalog_uri: str | None = None
    request_timeout_seconds: float = 10.0
    replication_enabled: bool = True
    repository_backend: RepositoryBackend = RepositoryBackend.IN_MEMORY
    postgres_dsn: str | None = None
    postgres_pool_min_size: int = 1
    postgres_pool_max_size: int = 10

    @model_validator(mode="after")
    def validate_settings(self) -> "Settings":
        """Ensure backend-specific and numeric settings are valid."""

        if self.repository_backend == RepositoryBackend.POSTGRES and not self.postgres_dsn:
            raise ValueError(
                "DSX_POSTGRES_DSN is required when DSX_REPOSITORY_BACKEND=postgres."
            )
        if self.postgres_pool_min_size < 1:
            raise ValueError("DSX_POSTGRES_POOL_MIN_SIZE must be >= 1.")
        if self.postgres_pool_max_size < self.postgres_pool_min_size:
            raise ValueError(
                "DSX_POSTGRES_POOL_MAX_SIZE must be >= DSX_POSTGRES_POOL_MIN_SIZE."
            )
        if self.request_timeout_seconds <= 0:
            raise ValueError("DSX_REQUEST_TIMEOUT_SECONDS must be > 0.")
        if self.connector_endpoint is not None and not self.connector_endpoint.strip():
            raise ValueError("DSX_CONNECTOR_ENDPOINT cannot be blank.")
        return self

    model_config = SettingsConfigDict(env_prefix="DSX_", extra="ignore")


__all__ = ["RepositoryBackend", "Settings"]
