from __future__ import annotations

import asyncio

import pytest
from conftest import FakeDataspace

from dataspace_exchange.application.services import PIIComplianceGate
from dataspace_exchange.domain.errors import PIIViolationError
from dataspace_exchange.domain.exchange_models import MappedResource


def _mapped(*resources: str) -> list[MappedResource]:
    return [
        MappedResource(service_offering="offering-1", resource=resource)
        for resource in resources
    ]


@pytest.fixture
def gate(dataspace: FakeDataspace) -> PIIComplianceGate:
    dataspace.add_catalog("r1", {"containsPII": False})
    dataspace.add_catalog("r2", {})
    dataspace.add_catalog("r-pii", {"containsPII": True})
    dataspace.add_catalog("sw-clean", {"usePII": False})
    dataspace.add_catalog("sw-pii", {"usePII": True})
    return PIIComplianceGate(dataspace)


def test_clean_resources_and_purpose_pass(gate: PIIComplianceGate, dataspace: FakeDataspace) -> None:
    dataspace.add_catalog("purpose", {"usePII": False})

    asyncio.run(gate.verify(_mapped("r1", "r2"), "purpose"))


def test_resource_containing_pii_vetoes_regardless_of_purpose(
    gate: PIIComplianceGate, dataspace: FakeDataspace
) -> None:
    dataspace.add_catalog("purpose", {"softwareResources": ["sw-clean"], "usePII": False})

    with pytest.raises(PIIViolationError):
        asyncio.run(gate.verify(_mapped("r1", "r-pii"), "purpose"))


def test_purpose_flag_vetoes_without_software_resources(
    gate: PIIComplianceGate, dataspace: FakeDataspace
) -> None:
    dataspace.add_catalog("purpose", {"softwareResources": None, "usePII": True})

    assert asyncio.run(gate.requires_pii(_mapped("r1"), "purpose")) is True


def test_software_resources_take_precedence_over_purpose_flag(
    gate: PIIComplianceGate, dataspace: FakeDataspace
) -> None:
    dataspace.add_catalog("purpose", {"softwareResources": ["sw-clean"], "usePII": True})

    assert asyncio.run(gate.requires_pii(_mapped("r1"), "purpose")) is False


def test_software_resource_using_pii_vetoes(
    gate: PIIComplianceGate, dataspace: FakeDataspace
) -> None:
    dataspace.add_catalog("purpose", {"softwareResources": ["sw-clean", "sw-pii"]})

    with pytest.raises(PIIViolationError, match="purpose"):
        asyncio.run(gate.verify(_mapped("r1"), "purpose"))


def test_every_descriptor_is_fetched(gate: PIIComplianceGate, dataspace: FakeDataspace) -> None:
    dataspace.add_catalog("purpose", {"softwareResources": ["sw-pii", "sw-clean"]})

    asyncio.run(gate.requires_pii(_mapped("r-pii", "r1"), "purpose"))

    assert dataspace.catalog_lookups == ["r-pii", "r1", "purpose", "sw-pii", "sw-clean"]
