"""PostgreSQL repository implementation for data exchanges."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable, Mapping
from typing import Any

import asyncpg  # type: ignore[import-untyped]

from dataspace_exchange.domain.entities import UPDATABLE_FIELDS, DataExchange
from dataspace_exchange.domain.exchange_models import MappedResource
from dataspace_exchange.domain.exchange_status import DataExchangeStatus
from dataspace_exchange.domain.ports import DataExchangeRepository

_SELECT_COLUMNS = """
    id,
    provider_endpoint,
    consumer_endpoint,
    resources,
    purpose_id,
    contract,
    status,
    provider_params,
    data_processing,
    payload,
    remote_exchange_id,
    created_at,
    updated_at
"""

_JSONB_COLUMNS = frozenset({"resources", "provider_params", "data_processing", "payload"})


def _encode_resources(resources: list[MappedResource]) -> str:
    return json.dumps(
        [resource.model_dump(by_alias=True, exclude_none=True) for resource in resources]
    )


def _encode_status(status: DataExchangeStatus) -> str:
    return DataExchangeStatus(status).value


_ENCODERS: dict[str, Callable[[Any], Any]] = {
    "resources": _encode_resources,
    "status": _encode_status,
    "provider_params": json.dumps,
    "data_processing": json.dumps,
    "payload": json.dumps,
}


class PostgresDataExchangeRepository(DataExchangeRepository):
    """Data exchange repository backed by PostgreSQL."""

    def __init__(
        self,
        dsn: str,
        min_pool_size: int = 1,
        max_pool_size: int = 10,
    ) -> None:
        self._dsn = dsn
        self._min_pool_size = min_pool_size
        self._max_pool_size = max_pool_size
        self._pool: asyncpg.Pool | None = None
        self._pool_lock = asyncio.Lock()

    async def get(self, exchange_id: str) -> DataExchange | None:
        """Return by exchange id."""

        pool = await self._get_pool()
        row = await pool.fetchrow(
            f"SELECT {_SELECT_COLUMNS} FROM data_exchanges WHERE id = $1",
            exchange_id,
        )
        if row is None:
            return None
        return self._to_entity(row)

    async def list_data_exchanges(self) -> list[DataExchange]:
        """Return all exchanges, oldest first."""

        pool = await self._get_pool()
        rows = await pool.fetch(
            f"SELECT {_SELECT_COLUMNS} FROM data_exchanges ORDER BY created_at ASC, id ASC",
        )
        return [self._to_entity(row) for row in rows]

    async def create(self, data_exchange: DataExchange) -> None:
        """Insert a new exchange row."""

        pool = await self._get_pool()
        await pool.execute(
            """
            INSERT INTO data_exchanges (
                id,
                provider_endpoint,
                consumer_endpoint,
                resources,
                purpose_id,
                contract,
                status,
                provider_params,
                data_processing,
                payload,
                remote_exchange_id,
                created_at,
                updated_at
            ) VALUES (
                $1, $2, $3, $4::jsonb, $5, $6, $7, $8::jsonb, $9::jsonb, $10::jsonb, $11, $12, $13
            )
            """,
            data_exchange.id,
            data_exchange.provider_endpoint,
            data_exchange.consumer_endpoint,
            _encode_resources(data_exchange.resources),
            data_exchange.purpose_id,
            data_exchange.contract,
            data_exchange.status.value,
            json.dumps(data_exchange.provider_params),
            json.dumps(data_exchange.data_processing),
            None if data_exchange.payload is None else json.dumps(data_exchange.payload),
            data_exchange.remote_exchange_id,
            data_exchange.created_at,
            data_exchange.updated_at,
        )

    async def update(
        self, exchange_id: str, changes: Mapping[str, Any]
    ) -> DataExchange | None:
        """Apply changes with one `UPDATE ... RETURNING` statement."""

        if not changes:
            return await self.get(exchange_id)

        assignments: list[str] = []
        values: list[Any] = [exchange_id]
        for column, value in changes.items():
            if column not in UPDATABLE_FIELDS:
                raise ValueError(f"Column '{column}' cannot be updated.")
            values.append(self._encode(column, value))
            cast = "::jsonb" if column in _JSONB_COLUMNS else ""
            assignments.append(f"{column} = ${len(values)}{cast}")

        pool = await self._get_pool()
        row = await pool.fetchrow(
            f"""
            UPDATE data_exchanges
            SET {", ".join(assignments)}
            WHERE id = $1
            RETURNING {_SELECT_COLUMNS}
            """,
            *values,
        )
        if row is None:
            return None
        return self._to_entity(row)

    async def close(self) -> None:
        """Close the pool if it was initialized."""

        pool = self._pool
        self._pool = None
        if pool is not None:
            await pool.close()

    async def _get_pool(self) -> asyncpg.Pool:
        if self._pool is not None:
            return self._pool

        async with self._pool_lock:
            if self._pool is None:
                pool = await asyncpg.create_pool(
                    dsn=self._dsn,
                    min_size=self._min_pool_size,
                    max_size=self._max_pool_size,
                )
                await self._ensure_schema(pool)
                self._pool = pool
        assert self._pool is not None
        return self._pool

    async def _ensure_schema(self, pool: asyncpg.Pool) -> None:
        await pool.execute(
            """
            CREATE TABLE IF NOT EXISTS data_exchanges (
                id TEXT PRIMARY KEY,
                provider_endpoint TEXT,
                consumer_endpoint TEXT,
                resources JSONB NOT NULL DEFAULT '[]'::jsonb,
                purpose_id TEXT NOT NULL,
                contract TEXT NOT NULL,
                status TEXT NOT NULL,
                provider_params JSONB NOT NULL DEFAULT '[]'::jsonb,
                data_processing JSONB NOT NULL DEFAULT '{}'::jsonb,
                payload JSONB,
                remote_exchange_id TEXT,
                created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
                updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
            );
            CREATE INDEX IF NOT EXISTS idx_data_exchanges_contract
                ON data_exchanges (contract);
            """
        )

    def _encode(self, column: str, value: Any) -> Any:
        if value is None:
            return None
        encoder = _ENCODERS.get(column)
        if encoder is None:
            return value
        return encoder(value)

    def _to_entity(self, row: asyncpg.Record) -> DataExchange:
        resources = self._decode_json_field(row["resources"]) or []
        provider_params = self._decode_json_field(row["provider_params"]) or []
        data_processing = self._decode_json_field(row["data_processing"]) or {}
        if not isinstance(resources, list):
            raise TypeError(f"Expected list payload for resources, got {type(resources)!r}.")
        if not isinstance(provider_params, list):
            raise TypeError(
                f"Expected list payload for provider_params, got {type(provider_params)!r}."
            )
        if not isinstance(data_processing, dict):
            raise TypeError(
                f"Expected dict payload for data_processing, got {type(data_processing)!r}."
            )

        return DataExchange(
            id=str(row["id"]),
            provider_endpoint=self._as_optional_str(row["provider_endpoint"]),
            consumer_endpoint=self._as_optional_str(row["consumer_endpoint"]),
            resources=[MappedResource.model_validate(item) for item in resources],
            purpose_id=str(row["purpose_id"]),
            contract=str(row["contract"]),
            status=DataExchangeStatus(str(row["status"])),
            provider_params=provider_params,
            data_processing=data_processing,
            payload=self._decode_json_field(row["payload"]),
            remote_exchange_id=self._as_optional_str(row["remote_exchange_id"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )

    def _decode_json_field(self, value: object) -> Any:
        if value is None:
            return None
        if isinstance(value, str):
            return json.loads(value)
        return value

    def _as_optional_str(self, value: object) -> str | None:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        raise TypeError(f"Expected optional string value, got {type(value)!r}.")


__all__ = ["PostgresDataExchangeRepository"]
