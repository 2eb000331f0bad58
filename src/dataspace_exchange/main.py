"""FastAPI application entrypoint."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from dataspace_exchange import __version__
from dataspace_exchange.api import api_router
from dataspace_exchange.api.dependencies import get_data_exchange_service, get_settings
from dataspace_exchange.infrastructure.repositories import PostgresDataExchangeRepository


def create_app() -> FastAPI:
    """Build FastAPI application."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        """Build singleton dependencies at startup and release the pool on shutdown."""

        service = get_data_exchange_service()
        yield
        repository = service.repository
        if isinstance(repository, PostgresDataExchangeRepository):
            await repository.close()

    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        lifespan=lifespan,
    )
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()


def run() -> None:
    """Run local development server."""

    settings = get_settings()
    uvicorn.run(
        "dataspace_exchange.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


__all__ = ["app", "create_app", "run"]
