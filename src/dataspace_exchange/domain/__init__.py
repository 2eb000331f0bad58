"""Domain public API."""

from dataspace_exchange.domain.dataspace_models import (
    CatalogDescriptor,
    Contract,
    ContractPurpose,
    ContractServiceOffering,
    ResourceReference,
    SelfDescription,
)
from dataspace_exchange.domain.entities import DataExchange
from dataspace_exchange.domain.errors import (
    DataExchangeError,
    DataExchangeNotFoundError,
    DataExchangeValidationError,
    DataProcessingNotFoundError,
    DataspaceLookupError,
    EmptyDataProcessingListError,
    EmptyResourceMappingError,
    ExchangeReplicationError,
    InvalidPurposeError,
    InvalidResourceError,
    LocalEndpointNotConfiguredError,
    MissingConsumerEndpointError,
    MissingParametersError,
    MissingProviderEndpointError,
    PIIViolationError,
    ResourceNotInOfferingError,
    RoleResolutionFailedError,
)
from dataspace_exchange.domain.exchange_models import (
    BilateralFlowRequest,
    DataExchangeErrorReport,
    DataExchangeListResponse,
    DataExchangeReplicaMessage,
    DataExchangeResponse,
    DataExchangeSuccessReport,
    DataExchangeUpdateMessage,
    EcosystemFlowRequest,
    ExchangeFlowResponse,
    MappedResource,
)
from dataspace_exchange.domain.exchange_status import DataExchangeStatus
from dataspace_exchange.domain.ports import (
    CatalogRegistry,
    ContractRegistry,
    DataExchangeRepository,
    ExchangeReplicator,
    ParticipantDirectory,
)
from dataspace_exchange.domain.resources import map_resources, verify_data_processing
from dataspace_exchange.domain.roles import (
    ExchangeRole,
    infer_bilateral_role,
    infer_ecosystem_role,
)

__all__ = [
    "BilateralFlowRequest",
    "CatalogDescriptor",
    "CatalogRegistry",
    "Contract",
    "ContractPurpose",
    "ContractRegistry",
    "ContractServiceOffering",
    "DataExchange",
    "DataExchangeError",
    "DataExchangeErrorReport",
    "DataExchangeListResponse",
    "DataExchangeNotFoundError",
    "DataExchangeReplicaMessage",
    "DataExchangeRepository",
    "DataExchangeResponse",
    "DataExchangeStatus",
    "DataExchangeSuccessReport",
    "DataExchangeUpdateMessage",
    "DataExchangeValidationError",
    "DataProcessingNotFoundError",
    "DataspaceLookupError",
    "EcosystemFlowRequest",
    "EmptyDataProcessingListError",
    "EmptyResourceMappingError",
    "ExchangeFlowResponse",
    "ExchangeReplicationError",
    "ExchangeReplicator",
    "ExchangeRole",
    "InvalidPurposeError",
    "InvalidResourceError",
    "LocalEndpointNotConfiguredError",
    "MappedResource",
    "MissingConsumerEndpointError",
    "MissingParametersError",
    "MissingProviderEndpointError",
    "PIIViolationError",
    "ParticipantDirectory",
    "ResourceNotInOfferingError",
    "ResourceReference",
    "RoleResolutionFailedError",
    "SelfDescription",
    "infer_bilateral_role",
    "infer_ecosystem_role",
    "map_resources",
    "verify_data_processing",
]
