"""Route modules public API."""

from dataspace_exchange.api.routes.data_exchanges import router as data_exchanges_router
from dataspace_exchange.api.routes.flows import router as flows_router
from dataspace_exchange.api.routes.health import router as health_router

__all__ = ["data_exchanges_router", "flows_router", "health_router"]
