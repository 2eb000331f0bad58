"""Health check routes."""

from fastapi import APIRouter, Depends

from dataspace_exchange.api.dependencies import get_settings
from dataspace_exchange.config import Settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def healthz(settings: Settings = Depends(get_settings)) -> dict[str, str | bool]:
    """Liveness probe; also tells whether flows can resolve the local role."""

    return {
        "status": "ok",
        "connectorConfigured": settings.connector_endpoint is not None,
    }


__all__ = ["router"]
