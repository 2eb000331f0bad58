"""Resource mapping and contract data-processing checks."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dataspace_exchange.domain.dataspace_models import ResourceReference
from dataspace_exchange.domain.errors import (
    DataProcessingNotFoundError,
    EmptyDataProcessingListError,
    EmptyResourceMappingError,
    ResourceNotInOfferingError,
)
from dataspace_exchange.domain.exchange_models import MappedResource

ResourceItem = str | ResourceReference


def _resource_id(item: ResourceItem) -> str:
    if isinstance(item, str):
        return item
    return item.resource


def _mapped(item: ResourceItem, service_offering: str) -> MappedResource:
    if isinstance(item, str):
        return MappedResource(service_offering=service_offering, resource=item)
    return MappedResource(
        service_offering=service_offering,
        resource=item.resource,
        params=item.params,
    )


def map_resources(
    selection: Sequence[ResourceItem] | None,
    declared: Sequence[ResourceItem],
    service_offering: str,
) -> list[MappedResource]:
    """Reconcile a caller selection with the resources an offering declares.

    An empty selection maps every declared resource, keeping declared params,
    and fails when the offering declares none.
    Otherwise each selected item must be declared by the offering; params on
    object-form selections are kept and bare identifiers carry none.
    """

    if not selection:
        if not declared:
            raise EmptyResourceMappingError(
                f"Service offering '{service_offering}' declares no data resources."
            )
        return [_mapped(item, service_offering) for item in declared]

    declared_ids = {_resource_id(item) for item in declared}
    missing = [_resource_id(item) for item in selection if _resource_id(item) not in declared_ids]
    if missing:
        raise ResourceNotInOfferingError(
            f"Resources {missing} do not exist in service offering '{service_offering}'."
        )
    return [_mapped(item, service_offering) for item in selection]


def verify_data_processing(
    data_processing_id: str,
    declared: Sequence[dict[str, Any]],
) -> dict[str, Any]:
    """Return the contract data-processing entry matching `data_processing_id`."""

    if not declared:
        raise EmptyDataProcessingListError("Data processing is empty in the contract.")

    for data_processing in declared:
        if data_processing.get("catalogId") == data_processing_id:
            return data_processing

    raise DataProcessingNotFoundError(
        f"Data processing '{data_processing_id}' not found in the contract."
    )


__all__ = ["ResourceItem", "map_resources", "verify_data_processing"]
