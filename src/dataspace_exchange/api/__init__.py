"""HTTP API package."""

from dataspace_exchange.api.router import api_router

__all__ = ["api_router"]
