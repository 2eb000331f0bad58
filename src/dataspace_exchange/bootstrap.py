"""Application bootstrap/wiring."""

import logging

from dataspace_exchange.application.services import DataExchangeService
from dataspace_exchange.config import RepositoryBackend, Settings
from dataspace_exchange.domain.ports import DataExchangeRepository, ExchangeReplicator
from dataspace_exchange.infrastructure.dataspace import DataspaceClient
from dataspace_exchange.infrastructure.replication import (
    HttpExchangeReplicator,
    NoopExchangeReplicator,
)
from dataspace_exchange.infrastructure.repositories import (
    InMemoryDataExchangeRepository,
    PostgresDataExchangeRepository,
)

logger = logging.getLogger(__name__)


def _build_repository(settings: Settings) -> DataExchangeRepository:
    if settings.repository_backend == RepositoryBackend.POSTGRES:
        if settings.postgres_dsn is None:
            raise ValueError(
                "DSX_POSTGRES_DSN is required when DSX_REPOSITORY_BACKEND=postgres."
            )
        return PostgresDataExchangeRepository(
            dsn=settings.postgres_dsn,
            min_pool_size=settings.postgres_pool_min_size,
            max_pool_size=settings.postgres_pool_max_size,
        )
    return InMemoryDataExchangeRepository()


def _build_replicator(settings: Settings, client: DataspaceClient) -> ExchangeReplicator:
    if not settings.replication_enabled:
        logger.info("Cross-participant replication disabled; using noop replicator.")
        return NoopExchangeReplicator()
    return HttpExchangeReplicator(client)


def build_data_exchange_service(settings: Settings) -> DataExchangeService:
    """Compose service graph."""

    if settings.connector_endpoint is None:
        logger.warning(
            "DSX_CONNECTOR_ENDPOINT is not set. Exchange flows will fail until it is configured."
        )

    client = DataspaceClient(
        contract_uri=settings.contract_uri,
        catalog_uri=settings.catalog_uri,
        timeout_seconds=settings.request_timeout_seconds,
    )
    return DataExchangeService(
        repository=_build_repository(settings),
        contracts=client,
        catalog=client,
        participants=client,
        replicator=_build_replicator(settings, client),
        local_endpoint=settings.connector_endpoint,
    )


__all__ = ["build_data_exchange_service"]
