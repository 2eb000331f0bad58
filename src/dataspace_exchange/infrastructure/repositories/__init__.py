"""Repository implementations."""

from dataspace_exchange.infrastructure.repositories.in_memory_data_exchange_repository import (
    InMemoryDataExchangeRepository,
)
from dataspace_exchange.infrastructure.repositories.postgres_data_exchange_repository import (
    PostgresDataExchangeRepository,
)

__all__ = ["InMemoryDataExchangeRepository", "PostgresDataExchangeRepository"]
