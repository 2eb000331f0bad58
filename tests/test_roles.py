from __future__ import annotations

import pytest

from dataspace_exchange.domain.errors import RoleResolutionFailedError
from dataspace_exchange.domain.exchange_status import (
    DataExchangeStatus,
    error_status_for_origin,
    success_status_for_origin,
)
from dataspace_exchange.domain.roles import (
    ExchangeRole,
    infer_bilateral_role,
    infer_ecosystem_role,
    same_endpoint,
)


def test_bilateral_role_is_provider_when_local_endpoint_matches() -> None:
    role = infer_bilateral_role("https://p.example.com/", "https://p.example.com")

    assert role is ExchangeRole.PROVIDER


def test_bilateral_role_defaults_to_consumer() -> None:
    role = infer_bilateral_role("https://q.example.com", "https://p.example.com")

    assert role is ExchangeRole.CONSUMER


def test_ecosystem_role_checks_consumer_before_provider() -> None:
    role = infer_ecosystem_role(
        "https://same.example.com",
        provider_endpoint="https://same.example.com",
        consumer_endpoint="https://same.example.com",
    )

    assert role is ExchangeRole.CONSUMER


def test_ecosystem_role_resolves_provider() -> None:
    role = infer_ecosystem_role(
        "https://p.example.com",
        provider_endpoint="https://p.example.com",
        consumer_endpoint="https://q.example.com",
    )

    assert role is ExchangeRole.PROVIDER


def test_ecosystem_role_fails_when_local_endpoint_matches_neither() -> None:
    with pytest.raises(RoleResolutionFailedError):
        infer_ecosystem_role(
            "https://other.example.com",
            provider_endpoint="https://p.example.com",
            consumer_endpoint=None,
        )


def test_missing_endpoint_never_matches() -> None:
    assert not same_endpoint(None, None)
    assert not same_endpoint("https://p.example.com", None)
    assert same_endpoint(" https://p.example.com/ ", "https://p.example.com")


def test_counterpart_role() -> None:
    assert ExchangeRole.PROVIDER.counterpart is ExchangeRole.CONSUMER
    assert ExchangeRole.CONSUMER.counterpart is ExchangeRole.PROVIDER


@pytest.mark.parametrize(
    ("origin", "error_status", "success_status"),
    [
        ("provider", DataExchangeStatus.PROVIDER_EXPORT_ERROR, DataExchangeStatus.EXPORT_SUCCESS),
        ("consumer", DataExchangeStatus.CONSUMER_IMPORT_ERROR, DataExchangeStatus.IMPORT_SUCCESS),
        ("Provider", DataExchangeStatus.UNDEFINED_ERROR, DataExchangeStatus.UNDEFINED_ERROR),
        ("", DataExchangeStatus.UNDEFINED_ERROR, DataExchangeStatus.UNDEFINED_ERROR),
    ],
)
def test_origin_status_mapping(
    origin: str,
    error_status: DataExchangeStatus,
    success_status: DataExchangeStatus,
) -> None:
    assert error_status_for_origin(origin) is error_status
    assert success_status_for_origin(origin) is success_status
