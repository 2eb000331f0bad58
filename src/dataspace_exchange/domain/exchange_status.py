"""Data exchange status helpers."""

from enum import StrEnum


class DataExchangeStatus(StrEnum):
    """Supported data exchange states."""

    PENDING = "PENDING"
    PROVIDER_EXPORT_ERROR = "PROVIDER_EXPORT_ERROR"
    CONSUMER_IMPORT_ERROR = "CONSUMER_IMPORT_ERROR"
    UNDEFINED_ERROR = "UNDEFINED_ERROR"
    EXPORT_SUCCESS = "EXPORT_SUCCESS"
    IMPORT_SUCCESS = "IMPORT_SUCCESS"


_ORIGIN_PROVIDER = "provider"
_ORIGIN_CONSUMER = "consumer"


def error_status_for_origin(origin: str) -> DataExchangeStatus:
    """Map the reporting participant of an error to its status."""

    if origin == _ORIGIN_PROVIDER:
        return DataExchangeStatus.PROVIDER_EXPORT_ERROR
    if origin == _ORIGIN_CONSUMER:
        return DataExchangeStatus.CONSUMER_IMPORT_ERROR
    return DataExchangeStatus.UNDEFINED_ERROR


def success_status_for_origin(origin: str) -> DataExchangeStatus:
    """Map the reporting participant of a success to its status."""

    if origin == _ORIGIN_PROVIDER:
        return DataExchangeStatus.EXPORT_SUCCESS
    if origin == _ORIGIN_CONSUMER:
        return DataExchangeStatus.IMPORT_SUCCESS
    return DataExchangeStatus.UNDEFINED_ERROR


__all__ = [
    "DataExchangeStatus",
    "error_status_for_origin",
    "success_status_for_origin",
]
