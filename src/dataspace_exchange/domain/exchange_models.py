"""Pydantic models for data exchange requests, replicas and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dataspace_exchange.domain.dataspace_models import ResourceReference
from dataspace_exchange.domain.exchange_status import DataExchangeStatus
from dataspace_exchange.domain.roles import ExchangeRole


class ExchangeModel(BaseModel):
    """Base model for data exchange messages."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class MappedResource(ExchangeModel):
    """Resource of a service offering attached to a data exchange."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    service_offering: str = Field(alias="serviceOffering")
    resource: str
    params: list[dict[str, Any]] | None = None


class BilateralFlowRequest(ExchangeModel):
    """Trigger payload for a two-party contract."""

    contract: str
    resources: list[str | ResourceReference] = Field(default_factory=list)
    provider_params: list[dict[str, Any]] | None = Field(default=None, alias="providerParams")
    data_processing_id: str | None = Field(default=None, alias="dataProcessingId")


class EcosystemFlowRequest(BilateralFlowRequest):
    """Trigger payload for an ecosystem contract."""

    resource_id: str | None = Field(default=None, alias="resourceId")
    purpose_id: str | None = Field(default=None, alias="purposeId")


class DataExchangeErrorReport(ExchangeModel):
    """Error report sent by either participant."""

    origin: str
    payload: Any | None = None


class DataExchangeSuccessReport(ExchangeModel):
    """Success report sent by either participant."""

    origin: str


class DataExchangeUpdateMessage(ExchangeModel):
    """Administrative patch; every field is applied as given."""

    provider_endpoint: str | None = Field(default=None, alias="providerEndpoint")
    consumer_endpoint: str | None = Field(default=None, alias="consumerEndpoint")
    resources: list[MappedResource] = Field(default_factory=list)
    purpose_id: str = Field(default="", alias="purposeId")
    contract: str = ""
    status: DataExchangeStatus = DataExchangeStatus.PENDING
    provider_params: list[dict[str, Any]] = Field(default_factory=list, alias="providerParams")
    data_processing: dict[str, Any] = Field(default_factory=dict, alias="dataProcessing")
    payload: Any | None = None
    remote_exchange_id: str | None = Field(default=None, alias="remoteExchangeId")


class DataExchangeReplicaMessage(ExchangeModel):
    """Creation request sent to the counterpart after a local exchange is created."""

    origin: ExchangeRole
    endpoint: str
    exchange_id: str = Field(alias="exchangeId")
    resources: list[MappedResource] = Field(min_length=1)
    purpose_id: str = Field(alias="purposeId")
    contract: str
    provider_params: list[dict[str, Any]] = Field(default_factory=list, alias="providerParams")
    data_processing: dict[str, Any] = Field(default_factory=dict, alias="dataProcessing")


class DataExchangeResponse(ExchangeModel):
    """Serialized data exchange record."""

    id: str
    provider_endpoint: str | None = Field(default=None, alias="providerEndpoint")
    consumer_endpoint: str | None = Field(default=None, alias="consumerEndpoint")
    resources: list[MappedResource]
    purpose_id: str = Field(alias="purposeId")
    contract: str
    status: DataExchangeStatus
    provider_params: list[dict[str, Any]] = Field(default_factory=list, alias="providerParams")
    data_processing: dict[str, Any] = Field(default_factory=dict, alias="dataProcessing")
    payload: Any | None = None
    remote_exchange_id: str | None = Field(default=None, alias="remoteExchangeId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")


class DataExchangeListResponse(ExchangeModel):
    """Collection wrapper for the list endpoint."""

    data_exchanges: list[DataExchangeResponse] = Field(alias="dataExchanges")


class ExchangeFlowResponse(ExchangeModel):
    """Outcome of a bilateral or ecosystem trigger."""

    data_exchange: DataExchangeResponse = Field(alias="dataExchange")
    provider_endpoint: str | None = Field(default=None, alias="providerEndpoint")
    replicated: bool


__all__ = [
    "BilateralFlowRequest",
    "DataExchangeErrorReport",
    "DataExchangeListResponse",
    "DataExchangeReplicaMessage",
    "DataExchangeResponse",
    "DataExchangeSuccessReport",
    "DataExchangeUpdateMessage",
    "EcosystemFlowRequest",
    "ExchangeFlowResponse",
    "ExchangeModel",
    "MappedResource",
]
