"""Infrastructure layer public API."""

from dataspace_exchange.infrastructure.dataspace import (
    DataspaceClient,
    DataspaceClientError,
)
from dataspace_exchange.infrastructure.replication import (
    HttpExchangeReplicator,
    NoopExchangeReplicator,
)
from dataspace_exchange.infrastructure.repositories import (
    InMemoryDataExchangeRepository,
    PostgresDataExchangeRepository,
)

__all__ = [
    "DataspaceClient",
    "DataspaceClientError",
    "HttpExchangeReplicator",
    "InMemoryDataExchangeRepository",
    "NoopExchangeReplicator",
    "PostgresDataExchangeRepository",
]
