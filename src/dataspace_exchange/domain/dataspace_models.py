"""Pydantic models for contract, catalog and participant lookups."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class DataspaceModel(BaseModel):
    """Base model for payloads returned by remote dataspace services."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ResourceReference(DataspaceModel):
    """Resource identifier with optional parameters."""

    resource: str
    params: list[dict[str, Any]] | None = None


class ContractServiceOffering(DataspaceModel):
    """Offering entry of an ecosystem contract."""

    service_offering: str = Field(alias="serviceOffering")
    participant: str | None = None


class ContractPurpose(DataspaceModel):
    """Purpose entry of a bilateral contract."""

    purpose: str


class Contract(DataspaceModel):
    """Contract record as served by the contract registry."""

    id: str | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    data_provider: str | None = Field(default=None, alias="dataProvider")
    data_consumer: str | None = Field(default=None, alias="dataConsumer")
    service_offering: str | None = Field(default=None, alias="serviceOffering")
    service_offerings: list[ContractServiceOffering] = Field(
        default_factory=list, alias="serviceOfferings"
    )
    purpose: list[ContractPurpose] = Field(default_factory=list)
    data_processings: list[dict[str, Any]] = Field(
        default_factory=list, alias="dataProcessings"
    )


class CatalogDescriptor(DataspaceModel):
    """Catalog entry for a service offering, resource or software."""

    data_resources: list[str | ResourceReference] = Field(
        default_factory=list, alias="dataResources"
    )
    software_resources: list[str] = Field(default_factory=list, alias="softwareResources")
    contains_pii: bool | None = Field(default=None, alias="containsPII")
    use_pii: bool | None = Field(default=None, alias="usePII")

    @field_validator("data_resources", "software_resources", mode="before")
    @classmethod
    def null_as_empty(cls, value: object) -> object:
        """Catalog entries may serialize absent lists as null."""

        return [] if value is None else value


class SelfDescription(DataspaceModel):
    """Participant self-description."""

    dataspace_endpoint: str | None = Field(default=None, alias="dataspaceEndpoint")


__all__ = [
    "CatalogDescriptor",
    "Contract",
    "ContractPurpose",
    "ContractServiceOffering",
    "DataspaceModel",
    "ResourceReference",
    "SelfDescription",
]
