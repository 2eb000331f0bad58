"""Cross-participant replication adapters."""

from dataspace_exchange.infrastructure.replication.http_exchange_replicator import (
    HttpExchangeReplicator,
)
from dataspace_exchange.infrastructure.replication.noop_exchange_replicator import (
    NoopExchangeReplicator,
)

__all__ = ["HttpExchangeReplicator", "NoopExchangeReplicator"]
