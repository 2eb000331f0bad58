"""Participant role inference for exchange flows."""

from enum import StrEnum

from dataspace_exchange.domain.errors import RoleResolutionFailedError


class ExchangeRole(StrEnum):
    """Side a connector plays in one data exchange."""

    PROVIDER = "provider"
    CONSUMER = "consumer"

    @property
    def counterpart(self) -> "ExchangeRole":
        """Return the role played by the other participant."""

        if self is ExchangeRole.PROVIDER:
            return ExchangeRole.CONSUMER
        return ExchangeRole.PROVIDER


def normalize_endpoint(endpoint: str) -> str:
    """Drop surrounding whitespace and trailing slashes from an endpoint URL."""

    return endpoint.strip().rstrip("/")


def same_endpoint(left: str | None, right: str | None) -> bool:
    """Compare two advertised endpoints; a missing endpoint never matches."""

    if left is None or right is None:
        return False
    return normalize_endpoint(left) == normalize_endpoint(right)


def infer_bilateral_role(local_endpoint: str, provider_endpoint: str) -> ExchangeRole:
    """Resolve the local role for a contract that names its provider directly.

    A connector that is not the contract provider is the initiating consumer.
    """

    if same_endpoint(local_endpoint, provider_endpoint):
        return ExchangeRole.PROVIDER
    return ExchangeRole.CONSUMER


def infer_ecosystem_role(
    local_endpoint: str,
    *,
    provider_endpoint: str | None,
    consumer_endpoint: str | None,
) -> ExchangeRole:
    """Resolve the local role from the participants behind two offerings.

    The consumer side is checked first.
    """

    if same_endpoint(local_endpoint, consumer_endpoint):
        return ExchangeRole.CONSUMER
    if same_endpoint(local_endpoint, provider_endpoint):
        return ExchangeRole.PROVIDER
    raise RoleResolutionFailedError(
        f"Connector endpoint '{local_endpoint}' matches neither provider "
        f"'{provider_endpoint}' nor consumer '{consumer_endpoint}'."
    )


__all__ = [
    "ExchangeRole",
    "infer_bilateral_role",
    "infer_ecosystem_role",
    "normalize_endpoint",
    "same_endpoint",
]
