"""Routes that trigger bilateral and ecosystem exchange flows."""

from __future__ import annotations

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException

from dataspace_exchange.api.dependencies import get_data_exchange_service
from dataspace_exchange.api.routes.data_exchanges import to_data_exchange_response
from dataspace_exchange.application.services import DataExchangeService, ExchangeFlowResult
from dataspace_exchange.domain.errors import (
    DataExchangeValidationError,
    DataspaceLookupError,
    LocalEndpointNotConfiguredError,
    RoleResolutionFailedError,
)
from dataspace_exchange.domain.exchange_models import (
    BilateralFlowRequest,
    EcosystemFlowRequest,
    ExchangeFlowResponse,
)

router = APIRouter(prefix="/exchanges", tags=["exchange flows"])


def _raise_http_exception(exc: Exception) -> NoReturn:
    if isinstance(exc, DataExchangeValidationError):
        raise HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, RoleResolutionFailedError):
        raise HTTPException(status_code=409, detail=str(exc))
    if isinstance(exc, DataspaceLookupError):
        raise HTTPException(status_code=502, detail=str(exc))
    if isinstance(exc, LocalEndpointNotConfiguredError):
        raise HTTPException(status_code=500, detail=str(exc))
    raise HTTPException(status_code=500, detail="Unexpected exchange flow error")


def _to_flow_response(result: ExchangeFlowResult) -> ExchangeFlowResponse:
    return ExchangeFlowResponse(
        data_exchange=to_data_exchange_response(result.data_exchange),
        provider_endpoint=result.provider_endpoint,
        replicated=result.replicated,
    )


@router.post(
    "/bilateral",
    response_model=ExchangeFlowResponse,
    response_model_exclude_none=True,
    status_code=201,
    responses={400: {"description": "Bad request"}, 502: {"description": "Lookup failed"}},
)
async def trigger_bilateral_flow(
    message: BilateralFlowRequest,
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> ExchangeFlowResponse:
    """Create a data exchange for a contract between two named participants."""

    try:
        result = await service.trigger_bilateral_flow(
            message.contract,
            resources=message.resources,
            provider_params=message.provider_params,
            data_processing_id=message.data_processing_id,
        )
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return _to_flow_response(result)


@router.post(
    "/ecosystem",
    response_model=ExchangeFlowResponse,
    response_model_exclude_none=True,
    status_code=201,
    responses={
        400: {"description": "Bad request"},
        409: {"description": "Connector is not a participant"},
        502: {"description": "Lookup failed"},
    },
)
async def trigger_ecosystem_flow(
    message: EcosystemFlowRequest,
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> ExchangeFlowResponse:
    """Create a data exchange from a resource offering and a purpose offering."""

    try:
        result = await service.trigger_ecosystem_flow(
            message.contract,
            resource_id=message.resource_id,
            purpose_id=message.purpose_id,
            resources=message.resources,
            provider_params=message.provider_params,
            data_processing_id=message.data_processing_id,
        )
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return _to_flow_response(result)


__all__ = ["router"]
