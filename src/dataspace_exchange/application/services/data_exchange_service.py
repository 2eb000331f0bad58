"""Data exchange use-case service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any
from uuid import uuid4

from dataspace_exchange.application.services.pii_gate import PIIComplianceGate
from dataspace_exchange.domain.dataspace_models import Contract, ContractServiceOffering
from dataspace_exchange.domain.entities import UPDATABLE_FIELDS, DataExchange, utc_now
from dataspace_exchange.domain.errors import (
    DataExchangeNotFoundError,
    DataExchangeValidationError,
    ExchangeReplicationError,
    InvalidPurposeError,
    InvalidResourceError,
    LocalEndpointNotConfiguredError,
    MissingConsumerEndpointError,
    MissingParametersError,
    MissingProviderEndpointError,
    RoleResolutionFailedError,
)
from dataspace_exchange.domain.exchange_models import (
    DataExchangeReplicaMessage,
    MappedResource,
)
from dataspace_exchange.domain.exchange_status import (
    error_status_for_origin,
    success_status_for_origin,
)
from dataspace_exchange.domain.ports import (
    CatalogRegistry,
    ContractRegistry,
    DataExchangeRepository,
    ExchangeReplicator,
    ParticipantDirectory,
)
from dataspace_exchange.domain.resources import (
    ResourceItem,
    map_resources,
    verify_data_processing,
)
from dataspace_exchange.domain.roles import (
    ExchangeRole,
    infer_bilateral_role,
    infer_ecosystem_role,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ExchangeFlowResult:
    """Created exchange together with the provider endpoint it resolved."""

    data_exchange: DataExchange
    provider_endpoint: str | None
    replicated: bool


class DataExchangeService:
    """Orchestrates exchange flows and status transitions."""

    def __init__(
        self,
        repository: DataExchangeRepository,
        contracts: ContractRegistry,
        catalog: CatalogRegistry,
        participants: ParticipantDirectory,
        replicator: ExchangeReplicator,
        local_endpoint: str | None,
    ) -> None:
        self._repository = repository
        self._contracts = contracts
        self._catalog = catalog
        self._participants = participants
        self._replicator = replicator
        self._local_endpoint = local_endpoint
        self._pii_gate = PIIComplianceGate(catalog)

    @property
    def repository(self) -> DataExchangeRepository:
        return self._repository

    async def list_data_exchanges(self) -> list[DataExchange]:
        """Return every stored exchange."""

        return await self._repository.list_data_exchanges()

    async def get_data_exchange(self, exchange_id: str) -> DataExchange:
        """Return one exchange or raise a not-found error."""

        data_exchange = await self._repository.get(exchange_id)
        if data_exchange is None:
            raise DataExchangeNotFoundError(f"No data exchange found for id '{exchange_id}'.")
        return data_exchange

    async def update_data_exchange(
        self, exchange_id: str, changes: Mapping[str, Any]
    ) -> DataExchange:
        """Administrative override: merge fields without checking transitions."""

        unknown = sorted(set(changes) - UPDATABLE_FIELDS)
        if unknown:
            raise DataExchangeValidationError(f"Fields {unknown} cannot be updated.")
        return await self._apply_changes(exchange_id, {**changes, "updated_at": utc_now()})

    async def report_error(
        self,
        exchange_id: str,
        origin: str,
        payload: Any | None = None,
    ) -> DataExchange:
        """Record an export or import failure reported by `origin`."""

        status = error_status_for_origin(origin)
        logger.info(
            "Data exchange '%s' reported error by '%s': %s.", exchange_id, origin, status
        )
        return await self._apply_changes(
            exchange_id,
            {"status": status, "payload": payload, "updated_at": utc_now()},
        )

    async def report_success(self, exchange_id: str, origin: str) -> DataExchange:
        """Record an export or import success reported by `origin`."""

        status = success_status_for_origin(origin)
        logger.info(
            "Data exchange '%s' reported success by '%s': %s.", exchange_id, origin, status
        )
        return await self._apply_changes(
            exchange_id,
            {"status": status, "updated_at": utc_now()},
        )

    async def trigger_bilateral_flow(
        self,
        contract_id: str,
        resources: Sequence[ResourceItem] | None = None,
        provider_params: list[dict[str, Any]] | None = None,
        data_processing_id: str | None = None,
    ) -> ExchangeFlowResult:
        """Create an exchange for a contract naming both participants directly."""

        local_endpoint = self._require_local_endpoint()
        contract = await self._contracts.get_contract(contract_id)
        data_processing = self._verify_data_processing(contract, data_processing_id)

        provider_url = self._require_reference(contract.data_provider, "dataProvider", contract_id)
        offering_id = self._require_reference(
            contract.service_offering, "serviceOffering", contract_id
        )
        provider = await self._participants.get_self_description(provider_url)
        offering = await self._catalog.get_catalog_data(offering_id)

        provider_endpoint = provider.dataspace_endpoint
        if not provider_endpoint:
            logger.warning("Provider '%s' is missing a dataspace endpoint.", provider_url)
            raise MissingProviderEndpointError(
                f"Provider '{provider_url}' does not expose a dataspace endpoint."
            )

        mapped_resources = map_resources(resources, offering.data_resources, offering_id)
        if not contract.purpose:
            raise InvalidPurposeError(f"Contract '{contract_id}' declares no purpose.")
        purpose_id = contract.purpose[0].purpose
        await self._pii_gate.verify(mapped_resources, purpose_id)

        role = infer_bilateral_role(local_endpoint, provider_endpoint)
        consumer_endpoint = None
        if role is ExchangeRole.PROVIDER:
            consumer_url = self._require_reference(
                contract.data_consumer, "dataConsumer", contract_id
            )
            consumer = await self._participants.get_self_description(consumer_url)
            consumer_endpoint = consumer.dataspace_endpoint

        return await self._create_and_replicate(
            role=role,
            local_endpoint=local_endpoint,
            provider_endpoint=provider_endpoint,
            consumer_endpoint=consumer_endpoint,
            resources=mapped_resources,
            purpose_id=purpose_id,
            contract_id=contract_id,
            provider_params=provider_params,
            data_processing=data_processing,
        )

    async def trigger_ecosystem_flow(
        self,
        contract_id: str,
        resource_id: str | None,
        purpose_id: str | None,
        resources: Sequence[ResourceItem] | None = None,
        provider_params: list[dict[str, Any]] | None = None,
        data_processing_id: str | None = None,
    ) -> ExchangeFlowResult:
        """Create an exchange whose participants are found through contract offerings."""

        if not resource_id or not purpose_id:
            logger.warning("Ecosystem flow for contract '%s' misses parameters.", contract_id)
            raise MissingParametersError("Both resourceId and purposeId are required.")

        local_endpoint = self._require_local_endpoint()
        contract = await self._contracts.get_contract(contract_id)
        data_processing = self._verify_data_processing(contract, data_processing_id)

        purpose_offering = self._find_offering(contract, purpose_id)
        if purpose_offering is None:
            raise InvalidPurposeError(
                f"Wrong purpose given: '{purpose_id}' is not an offering of "
                f"contract '{contract_id}'."
            )
        resource_offering = self._find_offering(contract, resource_id)
        if resource_offering is None:
            raise InvalidResourceError(
                f"Wrong resource given: '{resource_id}' is not an offering of "
                f"contract '{contract_id}'."
            )

        offering = await self._catalog.get_catalog_data(resource_id)
        mapped_resources = map_resources(resources, offering.data_resources, resource_id)

        consumer = await self._participants.get_self_description(
            self._require_reference(purpose_offering.participant, "participant", purpose_id)
        )
        provider = await self._participants.get_self_description(
            self._require_reference(resource_offering.participant, "participant", resource_id)
        )

        await self._pii_gate.verify(mapped_resources, purpose_id)

        try:
            role = infer_ecosystem_role(
                local_endpoint,
                provider_endpoint=provider.dataspace_endpoint,
                consumer_endpoint=consumer.dataspace_endpoint,
            )
        except RoleResolutionFailedError:
            logger.warning(
                "Connector '%s' is not a participant of contract '%s'.",
                local_endpoint,
                contract_id,
            )
            raise
        return await self._create_and_replicate(
            role=role,
            local_endpoint=local_endpoint,
            provider_endpoint=provider.dataspace_endpoint,
            consumer_endpoint=consumer.dataspace_endpoint,
            resources=mapped_resources,
            purpose_id=purpose_id,
            contract_id=contract_id,
            provider_params=provider_params,
            data_processing=data_processing,
        )

    async def receive_replica(self, message: DataExchangeReplicaMessage) -> DataExchange:
        """Create the local copy of an exchange started by the counterpart."""

        data_exchange = DataExchange(
            id=self._new_exchange_id(),
            resources=list(message.resources),
            purpose_id=message.purpose_id,
            contract=message.contract,
            provider_params=list(message.provider_params),
            data_processing=dict(message.data_processing),
            remote_exchange_id=message.exchange_id,
        )
        if message.origin is ExchangeRole.CONSUMER:
            data_exchange.consumer_endpoint = message.endpoint
        else:
            data_exchange.provider_endpoint = message.endpoint

        await self._repository.create(data_exchange)
        logger.info(
            "Created data exchange '%s' replicated from %s '%s'.",
            data_exchange.id,
            message.origin,
            message.endpoint,
        )
        return data_exchange

    async def _create_and_replicate(
        self,
        *,
        role: ExchangeRole,
        local_endpoint: str,
        provider_endpoint: str | None,
        consumer_endpoint: str | None,
        resources: list[MappedResource],
        purpose_id: str,
        contract_id: str,
        provider_params: list[dict[str, Any]] | None,
        data_processing: dict[str, Any],
    ) -> ExchangeFlowResult:
        """Persist the exchange locally, then propagate it to the counterpart."""

        data_exchange = DataExchange(
            id=self._new_exchange_id(),
            resources=resources,
            purpose_id=purpose_id,
            contract=contract_id,
            provider_params=[] if provider_params is None else list(provider_params),
            data_processing=data_processing,
        )
        if role is ExchangeRole.CONSUMER:
            if not provider_endpoint:
                raise MissingProviderEndpointError(
                    f"Provider of contract '{contract_id}' does not expose a dataspace endpoint."
                )
            data_exchange.provider_endpoint = provider_endpoint
        else:
            if not consumer_endpoint:
                raise MissingConsumerEndpointError(
                    f"Consumer of contract '{contract_id}' does not expose a dataspace endpoint."
                )
            data_exchange.consumer_endpoint = consumer_endpoint

        await self._repository.create(data_exchange)
        logger.info(
            "Created data exchange '%s' for contract '%s' as %s.",
            data_exchange.id,
            contract_id,
            role,
        )

        replicated = await self._replicate(data_exchange, role, local_endpoint)
        stored = await self._repository.get(data_exchange.id)
        return ExchangeFlowResult(
            data_exchange=data_exchange if stored is None else stored,
            provider_endpoint=provider_endpoint,
            replicated=replicated,
        )

    async def _replicate(
        self,
        data_exchange: DataExchange,
        role: ExchangeRole,
        local_endpoint: str,
    ) -> bool:
        """Best-effort creation at the counterpart; the local record is kept on failure."""

        try:
            remote_exchange_id = await self._replicator.replicate(
                data_exchange,
                origin=role,
                local_endpoint=local_endpoint,
            )
        except ExchangeReplicationError as exc:
            logger.warning(
                "Failed to replicate data exchange '%s' to %s '%s': %s",
                data_exchange.id,
                role.counterpart,
                data_exchange.counterpart_endpoint,
                exc,
            )
            return False

        if remote_exchange_id is not None:
            await self._repository.update(
                data_exchange.id,
                {"remote_exchange_id": remote_exchange_id, "updated_at": utc_now()},
            )
        return True

    async def _apply_changes(
        self, exchange_id: str, changes: Mapping[str, Any]
    ) -> DataExchange:
        data_exchange = await self._repository.update(exchange_id, changes)
        if data_exchange is None:
            raise DataExchangeNotFoundError(f"No data exchange found for id '{exchange_id}'.")
        return data_exchange

    def _require_local_endpoint(self) -> str:
        if not self._local_endpoint:
            raise LocalEndpointNotConfiguredError(
                "The connector endpoint is not configured; cannot infer the exchange role."
            )
        return self._local_endpoint

    def _require_reference(self, value: str | None, name: str, owner: str) -> str:
        if not value:
            raise DataExchangeValidationError(f"'{owner}' does not declare '{name}'.")
        return value

    def _verify_data_processing(
        self, contract: Contract, data_processing_id: str | None
    ) -> dict[str, Any]:
        if not data_processing_id:
            return {}
        return verify_data_processing(data_processing_id, contract.data_processings)

    def _find_offering(
        self, contract: Contract, service_offering: str
    ) -> ContractServiceOffering | None:
        for offering in contract.service_offerings:
            if offering.service_offering == service_offering:
                return offering
        return None

    def _new_exchange_id(self) -> str:
        return f"exchange-{uuid4()}"


__all__ = ["DataExchangeService", "ExchangeFlowResult"]
