from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.errors import ExchangeReplicationError
from dataspace_exchange.domain.exchange_models import MappedResource
from dataspace_exchange.domain.roles import ExchangeRole
from dataspace_exchange.infrastructure.dataspace import DataspaceClient
from dataspace_exchange.infrastructure.replication import (
    HttpExchangeReplicator,
    NoopExchangeReplicator,
)


def _data_exchange(**overrides: object) -> DataExchange:
    values: dict[str, object] = {
        "id": "exchange-1",
        "resources": [MappedResource(service_offering="offering-1", resource="r1")],
        "purpose_id": "pu1",
        "contract": "C1",
        "provider_endpoint": "https://provider.example.com",
        "provider_params": [{"format": "csv"}],
    }
    values.update(overrides)
    return DataExchange(**values)  # type: ignore[arg-type]


def test_http_replicator_targets_counterpart_endpoint() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code=201, json={"id": "exchange-remote"})

    replicator = HttpExchangeReplicator(
        DataspaceClient(transport=httpx.MockTransport(handler))
    )

    remote_id = asyncio.run(
        replicator.replicate(
            _data_exchange(),
            origin=ExchangeRole.CONSUMER,
            local_endpoint="https://consumer.example.com",
        )
    )

    assert remote_id == "exchange-remote"
    assert str(requests[0].url) == "https://provider.example.com/dataexchanges/replicas"
    payload = json.loads(requests[0].content.decode())
    assert payload["endpoint"] == "https://consumer.example.com"
    assert payload["providerParams"] == [{"format": "csv"}]


def test_http_replicator_wraps_client_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=503, text="unavailable")

    replicator = HttpExchangeReplicator(
        DataspaceClient(transport=httpx.MockTransport(handler))
    )

    with pytest.raises(ExchangeReplicationError, match="503 unavailable"):
        asyncio.run(
            replicator.replicate(
                _data_exchange(),
                origin=ExchangeRole.CONSUMER,
                local_endpoint="https://consumer.example.com",
            )
        )


def test_http_replicator_requires_counterpart_endpoint() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    replicator = HttpExchangeReplicator(
        DataspaceClient(transport=httpx.MockTransport(handler))
    )

    with pytest.raises(ExchangeReplicationError):
        asyncio.run(
            replicator.replicate(
                _data_exchange(provider_endpoint=None),
                origin=ExchangeRole.PROVIDER,
                local_endpoint="https://provider.example.com",
            )
        )


def test_noop_replicator_returns_no_remote_id() -> None:
    remote_id = asyncio.run(
        NoopExchangeReplicator().replicate(
            _data_exchange(),
            origin=ExchangeRole.CONSUMER,
            local_endpoint="https://consumer.example.com",
        )
    )

    assert remote_id is None


def test_http_replicator_wraps_malformed_counterpart_endpoint() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    replicator = HttpExchangeReplicator(
        DataspaceClient(transport=httpx.MockTransport(handler))
    )

    with pytest.raises(ExchangeReplicationError):
        asyncio.run(
            replicator.replicate(
                _data_exchange(provider_endpoint="https://[::1"),
                origin=ExchangeRole.CONSUMER,
                local_endpoint="https://consumer.example.com",
            )
        )
