from __future__ import annotations

import asyncio
import json
from datetime import UTC, datetime
from typing import Any

import pytest

from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.exchange_models import MappedResource
from dataspace_exchange.domain.exchange_status import DataExchangeStatus
from dataspace_exchange.infrastructure.repositories import (
    InMemoryDataExchangeRepository,
    PostgresDataExchangeRepository,
)

_NOW = datetime(2026, 1, 1, tzinfo=UTC)


def _data_exchange(exchange_id: str = "exchange-1") -> DataExchange:
    return DataExchange(
        id=exchange_id,
        resources=[MappedResource(service_offering="offering-1", resource="r1")],
        purpose_id="pu1",
        contract="C1",
        provider_endpoint="https://provider.example.com",
    )


def test_in_memory_repository_create_update_and_list() -> None:
    repository = InMemoryDataExchangeRepository()

    async def scenario() -> tuple[DataExchange | None, list[DataExchange]]:
        await repository.create(_data_exchange("exchange-1"))
        await repository.create(_data_exchange("exchange-2"))
        updated = await repository.update(
            "exchange-2", {"status": DataExchangeStatus.EXPORT_SUCCESS}
        )
        return updated, await repository.list_data_exchanges()

    updated, listed = asyncio.run(scenario())

    assert updated is not None
    assert updated.status is DataExchangeStatus.EXPORT_SUCCESS
    assert [item.id for item in listed] == ["exchange-1", "exchange-2"]


def test_in_memory_repository_rejects_duplicate_ids() -> None:
    repository = InMemoryDataExchangeRepository()
    asyncio.run(repository.create(_data_exchange()))

    with pytest.raises(ValueError):
        asyncio.run(repository.create(_data_exchange()))


def test_in_memory_repository_update_of_unknown_exchange_returns_none() -> None:
    repository = InMemoryDataExchangeRepository()

    assert asyncio.run(repository.update("missing", {"payload": {"a": 1}})) is None


class _RecordingPool:
    def __init__(self, row: dict[str, Any] | None) -> None:
        self.row = row
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    async def fetchrow(self, query: str, *args: Any) -> dict[str, Any] | None:
        self.calls.append((query, args))
        return self.row


def _row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": "exchange-1",
        "provider_endpoint": "https://provider.example.com",
        "consumer_endpoint": None,
        "resources": json.dumps([{"serviceOffering": "offering-1", "resource": "r1"}]),
        "purpose_id": "pu1",
        "contract": "C1",
        "status": "PROVIDER_EXPORT_ERROR",
        "provider_params": "[]",
        "data_processing": "{}",
        "payload": json.dumps({"reason": "failed"}),
        "remote_exchange_id": None,
        "created_at": _NOW,
        "updated_at": _NOW,
    }
    row.update(overrides)
    return row


def test_postgres_update_encodes_changes_in_one_statement() -> None:
    repository = PostgresDataExchangeRepository(dsn="postgresql://unused")
    pool = _RecordingPool(_row())
    repository._pool = pool  # type: ignore[assignment]

    data_exchange = asyncio.run(
        repository.update(
            "exchange-1",
            {
                "status": DataExchangeStatus.PROVIDER_EXPORT_ERROR,
                "payload": {"reason": "failed"},
                "updated_at": _NOW,
            },
        )
    )

    query, args = pool.calls[0]
    assert "UPDATE data_exchanges" in query
    assert "status = $2" in query
    assert "payload = $3::jsonb" in query
    assert "RETURNING" in query
    assert args == ("exchange-1", "PROVIDER_EXPORT_ERROR", '{"reason": "failed"}', _NOW)
    assert data_exchange is not None
    assert data_exchange.status is DataExchangeStatus.PROVIDER_EXPORT_ERROR
    assert data_exchange.payload == {"reason": "failed"}
    assert data_exchange.resources == [
        MappedResource(service_offering="offering-1", resource="r1")
    ]


def test_postgres_update_rejects_unknown_columns() -> None:
    repository = PostgresDataExchangeRepository(dsn="postgresql://unused")
    repository._pool = _RecordingPool(None)  # type: ignore[assignment]

    with pytest.raises(ValueError):
        asyncio.run(repository.update("exchange-1", {"id; DROP TABLE": "x"}))


def test_postgres_update_of_unknown_exchange_returns_none() -> None:
    repository = PostgresDataExchangeRepository(dsn="postgresql://unused")
    repository._pool = _RecordingPool(None)  # type: ignore[assignment]

    assert asyncio.run(repository.update("missing", {"contract": "C2"})) is None
