"""Domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from dataspace_exchange.domain.exchange_models import MappedResource
from dataspace_exchange.domain.exchange_status import DataExchangeStatus
from dataspace_exchange.domain.roles import ExchangeRole

UPDATABLE_FIELDS = frozenset(
    {
        "provider_endpoint",
        "consumer_endpoint",
        "resources",
        "purpose_id",
        "contract",
        "status",
        "provider_params",
        "data_processing",
        "payload",
        "remote_exchange_id",
        "updated_at",
    }
)


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(slots=True)
class DataExchange:
    """Mutable representation of one exchange between two connectors.

    Only the remote side is stored: `provider_endpoint` is set when the local
    connector consumes, `consumer_endpoint` when it provides.
    """

    id: str
    resources: list[MappedResource]
    purpose_id: str
    contract: str
    provider_endpoint: str | None = None
    consumer_endpoint: str | None = None
    status: DataExchangeStatus = DataExchangeStatus.PENDING
    provider_params: list[dict[str, Any]] = field(default_factory=list)
    data_processing: dict[str, Any] = field(default_factory=dict)
    payload: Any | None = None
    remote_exchange_id: str | None = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def local_role(self) -> ExchangeRole:
        """Role played by the connector owning this record."""

        if self.provider_endpoint is not None:
            return ExchangeRole.CONSUMER
        return ExchangeRole.PROVIDER

    @property
    def counterpart_endpoint(self) -> str | None:
        """Endpoint of the remote participant."""

        if self.provider_endpoint is not None:
            return self.provider_endpoint
        return self.consumer_endpoint


__all__ = ["DataExchange", "UPDATABLE_FIELDS", "utc_now"]
