"""Data exchange record routes: lookup, status reports and replicas."""

from __future__ import annotations

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Path

from dataspace_exchange.api.dependencies import get_data_exchange_service
from dataspace_exchange.application.services import DataExchangeService
from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.errors import (
    DataExchangeNotFoundError,
    DataExchangeValidationError,
)
from dataspace_exchange.domain.exchange_models import (
    DataExchangeErrorReport,
    DataExchangeListResponse,
    DataExchangeReplicaMessage,
    DataExchangeResponse,
    DataExchangeSuccessReport,
    DataExchangeUpdateMessage,
)

router = APIRouter(prefix="/dataexchanges", tags=["data exchanges"])


def to_data_exchange_response(data_exchange: DataExchange) -> DataExchangeResponse:
    """Serialize a stored exchange for the REST surface."""

    return DataExchangeResponse(
        id=data_exchange.id,
        provider_endpoint=data_exchange.provider_endpoint,
        consumer_endpoint=data_exchange.consumer_endpoint,
        resources=data_exchange.resources,
        purpose_id=data_exchange.purpose_id,
        contract=data_exchange.contract,
        status=data_exchange.status,
        provider_params=data_exchange.provider_params,
        data_processing=data_exchange.data_processing,
        payload=data_exchange.payload,
        remote_exchange_id=data_exchange.remote_exchange_id,
        created_at=data_exchange.created_at,
        updated_at=data_exchange.updated_at,
    )


def _raise_http_exception(exc: Exception) -> NoReturn:
    if isinstance(exc, DataExchangeNotFoundError):
        raise HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, DataExchangeValidationError):
        raise HTTPException(status_code=400, detail=str(exc))
    raise HTTPException(status_code=500, detail="Unexpected data exchange error")


@router.get(
    "",
    response_model=DataExchangeListResponse,
    response_model_exclude_none=True,
    status_code=200,
)
async def list_data_exchanges(
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> DataExchangeListResponse:
    """List every data exchange known to this connector."""

    try:
        data_exchanges = await service.list_data_exchanges()
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return DataExchangeListResponse(
        data_exchanges=[to_data_exchange_response(item) for item in data_exchanges]
    )


@router.post(
    "/replicas",
    response_model=DataExchangeResponse,
    response_model_exclude_none=True,
    status_code=201,
)
async def receive_data_exchange_replica(
    message: DataExchangeReplicaMessage,
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> DataExchangeResponse:
    """Create the local copy of an exchange started by the counterpart."""

    try:
        data_exchange = await service.receive_replica(message)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return to_data_exchange_response(data_exchange)


@router.get(
    "/{id}",
    response_model=DataExchangeResponse,
    response_model_exclude_none=True,
    status_code=200,
)
async def get_data_exchange(
    id: str = Path(...),
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> DataExchangeResponse:
    """Get one data exchange."""

    try:
        data_exchange = await service.get_data_exchange(id)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return to_data_exchange_response(data_exchange)


@router.put(
    "/{id}",
    response_model=DataExchangeResponse,
    response_model_exclude_none=True,
    status_code=200,
)
async def update_data_exchange(
    message: DataExchangeUpdateMessage,
    id: str = Path(...),
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> DataExchangeResponse:
    """Overwrite the fields present in the body, without transition checks."""

    changes = {name: getattr(message, name) for name in message.model_fields_set}
    try:
        data_exchange = await service.update_data_exchange(id, changes)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return to_data_exchange_response(data_exchange)


@router.put(
    "/{id}/error",
    response_model=DataExchangeResponse,
    response_model_exclude_none=True,
    status_code=200,
)
async def report_data_exchange_error(
    message: DataExchangeErrorReport,
    id: str = Path(...),
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> DataExchangeResponse:
    """Record a failed export or import."""

    try:
        data_exchange = await service.report_error(id, message.origin, message.payload)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return to_data_exchange_response(data_exchange)


@router.put(
    "/{id}/success",
    response_model=DataExchangeResponse,
    response_model_exclude_none=True,
    status_code=200,
)
async def report_data_exchange_success(
    message: DataExchangeSuccessReport,
    id: str = Path(...),
    service: DataExchangeService = Depends(get_data_exchange_service),
) -> DataExchangeResponse:
    """Record a successful export or import."""

    try:
        data_exchange = await service.report_success(id, message.origin)
    except Exception as exc:  # noqa: BLE001
        _raise_http_exception(exc)

    return to_data_exchange_response(data_exchange)


__all__ = ["router", "to_data_exchange_response"]
