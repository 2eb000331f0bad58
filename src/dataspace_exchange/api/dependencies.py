"""Dependency providers for FastAPI routes."""

from functools import lru_cache

from dataspace_exchange.application.services import DataExchangeService
from dataspace_exchange.bootstrap import build_data_exchange_service
from dataspace_exchange.config import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return singleton settings."""

    return Settings()


@lru_cache(maxsize=1)
def get_data_exchange_service() -> DataExchangeService:
    """Return singleton service graph."""

    return build_data_exchange_service(get_settings())


__all__ = ["get_data_exchange_service", "get_settings"]
