"""In-memory repository implementation for data exchanges."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any

from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.ports import DataExchangeRepository


class InMemoryDataExchangeRepository(DataExchangeRepository):
    """Simple repository for local development and tests."""

    def __init__(self) -> None:
        self._by_id: dict[str, DataExchange] = {}
        self._lock = asyncio.Lock()

    async def get(self, exchange_id: str) -> DataExchange | None:
        """Return by exchange id."""

        return self._by_id.get(exchange_id)

    async def list_data_exchanges(self) -> list[DataExchange]:
        """Return all exchanges in insertion order."""

        async with self._lock:
            return list(self._by_id.values())

    async def create(self, data_exchange: DataExchange) -> None:
        """Store a new exchange."""

        async with self._lock:
            if data_exchange.id in self._by_id:
                raise ValueError(f"Data exchange '{data_exchange.id}' already exists.")
            self._by_id[data_exchange.id] = data_exchange

    async def update(
        self, exchange_id: str, changes: Mapping[str, Any]
    ) -> DataExchange | None:
        """Apply changes to one exchange under the repository lock."""

        async with self._lock:
            data_exchange = self._by_id.get(exchange_id)
            if data_exchange is None:
                return None
            for name, value in changes.items():
                setattr(data_exchange, name, value)
            return data_exchange


__all__ = ["InMemoryDataExchangeRepository"]
