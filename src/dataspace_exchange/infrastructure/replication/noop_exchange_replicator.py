"""No-op replicator for standalone connectors."""

from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.ports import ExchangeReplicator
from dataspace_exchange.domain.roles import ExchangeRole


class NoopExchangeReplicator(ExchangeReplicator):
    """Replicator used when cross-participant replication is disabled."""

    async def replicate(
        self,
        data_exchange: DataExchange,
        *,
        origin: ExchangeRole,
        local_endpoint: str,
    ) -> str | None:
        _ = (data_exchange, origin, local_endpoint)
        return None


__all__ = ["NoopExchangeReplicator"]
