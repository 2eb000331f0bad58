"""Dataspace lookup adapters."""

from dataspace_exchange.infrastructure.dataspace.client import (
    DataspaceClient,
    DataspaceClientError,
)

__all__ = ["DataspaceClient", "DataspaceClientError"]
