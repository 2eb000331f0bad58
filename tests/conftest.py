from __future__ import annotations

from typing import Any

import pytest

from dataspace_exchange.application.services import DataExchangeService
from dataspace_exchange.domain.dataspace_models import (
    CatalogDescriptor,
    Contract,
    SelfDescription,
)
from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.errors import DataspaceLookupError, ExchangeReplicationError
from dataspace_exchange.domain.ports import ExchangeReplicator
from dataspace_exchange.domain.roles import ExchangeRole
from dataspace_exchange.infrastructure.repositories import InMemoryDataExchangeRepository

PROVIDER_ENDPOINT = "https://provider.example.com"
CONSUMER_ENDPOINT = "https://consumer.example.com"
PROVIDER_URL = "https://registry.example.com/participants/provider"
CONSUMER_URL = "https://registry.example.com/participants/consumer"


class FakeDataspace:
    """In-memory contract registry, catalog and participant directory."""

    def __init__(self) -> None:
        self.contracts: dict[str, Contract] = {}
        self.catalog: dict[str, CatalogDescriptor] = {}
        self.participants: dict[str, SelfDescription] = {
            PROVIDER_URL: SelfDescription(dataspace_endpoint=PROVIDER_ENDPOINT),
            CONSUMER_URL: SelfDescription(dataspace_endpoint=CONSUMER_ENDPOINT),
        }
        self.catalog_lookups: list[str] = []

    def add_contract(self, contract_id: str, payload: dict[str, Any]) -> None:
        self.contracts[contract_id] = Contract.model_validate(payload)

    def add_catalog(self, catalog_id: str, payload: dict[str, Any]) -> None:
        self.catalog[catalog_id] = CatalogDescriptor.model_validate(payload)

    async def get_contract(self, contract_id: str) -> Contract:
        try:
            return self.contracts[contract_id]
        except KeyError as exc:
            raise DataspaceLookupError(f"Contract '{contract_id}' not found.") from exc

    async def get_catalog_data(self, catalog_id: str) -> CatalogDescriptor:
        self.catalog_lookups.append(catalog_id)
        try:
            return self.catalog[catalog_id]
        except KeyError as exc:
            raise DataspaceLookupError(f"Catalog entry '{catalog_id}' not found.") from exc

    async def get_self_description(self, url: str) -> SelfDescription:
        try:
            return self.participants[url]
        except KeyError as exc:
            raise DataspaceLookupError(f"Participant '{url}' not found.") from exc


class RecordingReplicator:
    """Replicator that records calls and returns a fixed remote id or fails."""

    def __init__(self, remote_id: str | None = "remote-1", fail: bool = False) -> None:
        self.remote_id = remote_id
        self.fail = fail
        self.calls: list[tuple[DataExchange, ExchangeRole, str]] = []

    async def replicate(
        self,
        data_exchange: DataExchange,
        *,
        origin: ExchangeRole,
        local_endpoint: str,
    ) -> str | None:
        self.calls.append((data_exchange, origin, local_endpoint))
        if self.fail:
            raise ExchangeReplicationError("counterpart unreachable")
        return self.remote_id


def seed_bilateral(dataspace: FakeDataspace, *, use_pii: bool = False) -> None:
    dataspace.add_contract(
        "C1",
        {
            "_id": "C1",
            "dataProvider": PROVIDER_URL,
            "dataConsumer": CONSUMER_URL,
            "serviceOffering": "offering-1",
            "purpose": [{"purpose": "pu1"}],
            "dataProcessings": [{"catalogId": "dp-1", "status": "active"}],
        },
    )
    dataspace.add_catalog("offering-1", {"dataResources": ["r1", "r2"]})
    dataspace.add_catalog("r1", {"containsPII": False})
    dataspace.add_catalog("r2", {"containsPII": False})
    dataspace.add_catalog("pu1", {"softwareResources": [], "usePII": use_pii})


def seed_ecosystem(dataspace: FakeDataspace) -> None:
    dataspace.add_contract(
        "E1",
        {
            "_id": "E1",
            "serviceOfferings": [
                {"serviceOffering": "resource-offering", "participant": PROVIDER_URL},
                {"serviceOffering": "purpose-offering", "participant": CONSUMER_URL},
            ],
            "dataProcessings": [],
        },
    )
    dataspace.add_catalog(
        "resource-offering",
        {"dataResources": ["r1", {"resource": "r2", "params": [{"key": "v"}]}]},
    )
    dataspace.add_catalog("r1", {"containsPII": False})
    dataspace.add_catalog("r2", {"containsPII": False})
    dataspace.add_catalog("purpose-offering", {"softwareResources": ["sw-1"]})
    dataspace.add_catalog("sw-1", {"usePII": False})


def build_service(
    dataspace: FakeDataspace,
    replicator: ExchangeReplicator,
    local_endpoint: str | None,
    repository: InMemoryDataExchangeRepository | None = None,
) -> DataExchangeService:
    return DataExchangeService(
        repository=InMemoryDataExchangeRepository() if repository is None else repository,
        contracts=dataspace,
        catalog=dataspace,
        participants=dataspace,
        replicator=replicator,
        local_endpoint=local_endpoint,
    )


@pytest.fixture
def dataspace() -> FakeDataspace:
    return FakeDataspace()


@pytest.fixture
def replicator() -> RecordingReplicator:
    return RecordingReplicator()
