"""Domain exceptions for data exchange operations."""


class DataExchangeError(Exception):
    """Base class for data exchange errors."""


class DataExchangeNotFoundError(DataExchangeError):
    """Raised when a data exchange cannot be found."""


class DataExchangeValidationError(DataExchangeError):
    """Raised when a flow request fails contract or catalog validation."""


class ResourceNotInOfferingError(DataExchangeValidationError):
    """Raised when a selected resource is not declared by the service offering."""


class EmptyResourceMappingError(DataExchangeValidationError):
    """Raised when an exchange would be created without any resource."""


class PIIViolationError(DataExchangeValidationError):
    """Raised when a resource or consuming software requires PII handling."""


class MissingProviderEndpointError(DataExchangeValidationError):
    """Raised when the provider self-description has no dataspace endpoint."""


class MissingConsumerEndpointError(DataExchangeValidationError):
    """Raised when the consumer self-description has no dataspace endpoint."""


class MissingParametersError(DataExchangeValidationError):
    """Raised when an ecosystem flow is triggered without resource or purpose."""


class InvalidPurposeError(DataExchangeValidationError):
    """Raised when the purpose is not part of the contract."""


class InvalidResourceError(DataExchangeValidationError):
    """Raised when the resource offering is not part of the contract."""


class EmptyDataProcessingListError(DataExchangeValidationError):
    """Raised when a data processing is requested but the contract declares none."""


class DataProcessingNotFoundError(DataExchangeValidationError):
    """Raised when the requested data processing is not declared by the contract."""


class RoleResolutionFailedError(DataExchangeError):
    """Raised when the local connector is neither provider nor consumer of a flow."""


class LocalEndpointNotConfiguredError(DataExchangeError):
    """Raised when role inference runs without a configured connector endpoint."""


class DataspaceLookupError(DataExchangeError):
    """Raised when a contract, catalog or participant lookup fails."""


class ExchangeReplicationError(DataExchangeError):
    """Raised when a data exchange cannot be created at the counterpart."""


__all__ = [
    "DataExchangeError",
    "DataExchangeNotFoundError",
    "DataExchangeValidationError",
    "DataProcessingNotFoundError",
    "DataspaceLookupError",
    "EmptyResourceMappingError",
    "EmptyDataProcessingListError",
    "ExchangeReplicationError",
    "InvalidPurposeError",
    "InvalidResourceError",
    "LocalEndpointNotConfiguredError",
    "MissingConsumerEndpointError",
    "MissingParametersError",
    "MissingProviderEndpointError",
    "PIIViolationError",
    "ResourceNotInOfferingError",
    "RoleResolutionFailedError",
]
