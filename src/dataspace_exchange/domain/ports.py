"""Ports for persistence, dataspace lookups and replication."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from dataspace_exchange.domain.dataspace_models import (
    CatalogDescriptor,
    Contract,
    SelfDescription,
)
from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.roles import ExchangeRole


class DataExchangeRepository(Protocol):
    """Persistence port for data exchanges."""

    async def get(self, exchange_id: str) -> DataExchange | None:
        """Return a data exchange by id."""

    async def list_data_exchanges(self) -> list[DataExchange]:
        """Return all known data exchanges."""

    async def create(self, data_exchange: DataExchange) -> None:
        """Insert a new data exchange."""

    async def update(
        self, exchange_id: str, changes: Mapping[str, Any]
    ) -> DataExchange | None:
        """Apply field changes to one record and return it, or None if unknown."""


class ContractRegistry(Protocol):
    """Lookup port for negotiated contracts."""

    async def get_contract(self, contract_id: str) -> Contract:
        """Return a contract by id or URL."""


class CatalogRegistry(Protocol):
    """Lookup port for catalog descriptors."""

    async def get_catalog_data(self, catalog_id: str) -> CatalogDescriptor:
        """Return the catalog descriptor of an offering, resource or software."""


class ParticipantDirectory(Protocol):
    """Lookup port for participant self-descriptions."""

    async def get_self_description(self, url: str) -> SelfDescription:
        """Return the self-description published at `url`."""


class ExchangeReplicator(Protocol):
    """Outbound port creating the linked exchange at the counterpart."""

    async def replicate(
        self,
        data_exchange: DataExchange,
        *,
        origin: ExchangeRole,
        local_endpoint: str,
    ) -> str | None:
        """Create the counterpart copy and return its id when known."""


__all__ = [
    "CatalogRegistry",
    "ContractRegistry",
    "DataExchangeRepository",
    "ExchangeReplicator",
    "ParticipantDirectory",
]
