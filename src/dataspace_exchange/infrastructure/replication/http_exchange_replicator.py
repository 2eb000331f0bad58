"""HTTP replication of data exchanges to the counterpart connector."""

from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.errors import ExchangeReplicationError
from dataspace_exchange.domain.exchange_models import DataExchangeReplicaMessage
from dataspace_exchange.domain.ports import ExchangeReplicator
from dataspace_exchange.domain.roles import ExchangeRole
from dataspace_exchange.infrastructure.dataspace import DataspaceClient, DataspaceClientError


class HttpExchangeReplicator(ExchangeReplicator):
    """Create the linked exchange at the counterpart over HTTP."""

    def __init__(self, client: DataspaceClient) -> None:
        self._client = client

    async def replicate(
        self,
        data_exchange: DataExchange,
        *,
        origin: ExchangeRole,
        local_endpoint: str,
    ) -> str | None:
        target = data_exchange.counterpart_endpoint
        if target is None:
            raise ExchangeReplicationError(
                f"Data exchange '{data_exchange.id}' has no counterpart endpoint."
            )
        message = DataExchangeReplicaMessage(
            origin=origin,
            endpoint=local_endpoint,
            exchange_id=data_exchange.id,
            resources=data_exchange.resources,
            purpose_id=data_exchange.purpose_id,
            contract=data_exchange.contract,
            provider_params=data_exchange.provider_params,
            data_processing=data_exchange.data_processing,
        )
        try:
            return await self._client.create_replica(target, message)
        except DataspaceClientError as exc:
            raise ExchangeReplicationError(str(exc)) from exc


__all__ = ["HttpExchangeReplicator"]
