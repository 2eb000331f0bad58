"""Top-level API router composition."""

from fastapi import APIRouter

from dataspace_exchange.api.routes import data_exchanges_router, flows_router, health_router

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(data_exchanges_router)
api_router.include_router(flows_router)

__all__ = ["api_router"]
