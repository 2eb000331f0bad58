"""HTTP client for contract, catalog and participant lookups."""

from __future__ import annotations

from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from dataspace_exchange.domain.dataspace_models import (
    CatalogDescriptor,
    Contract,
    SelfDescription,
)
from dataspace_exchange.domain.errors import DataspaceLookupError
from dataspace_exchange.domain.exchange_models import DataExchangeReplicaMessage
from dataspace_exchange.domain.ports import (
    CatalogRegistry,
    ContractRegistry,
    ParticipantDirectory,
)

_ModelT = TypeVar("_ModelT", bound=BaseModel)

_REPLICA_PATH = "/dataexchanges/replicas"


class DataspaceClientError(DataspaceLookupError):
    """Raised when a dataspace service call fails."""


class DataspaceClient(ContractRegistry, CatalogRegistry, ParticipantDirectory):
    """Wrapper around contract, catalog and participant endpoints.

    Identifiers given as absolute URLs are dereferenced as-is; other
    identifiers are appended to the configured contract or catalog base URL.
    """

    def __init__(
        self,
        contract_uri: str | None = None,
        catalog_uri: str | None = None,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._contract_uri = self._normalize_base_url(contract_uri)
        self._catalog_uri = self._normalize_base_url(catalog_uri)
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def get_contract(self, contract_id: str) -> Contract:
        """GET the contract record."""

        url = self._resolve(self._contract_uri, contract_id, "contract")
        return self._parse(Contract, await self._get_json(url), url)

    async def get_catalog_data(self, catalog_id: str) -> CatalogDescriptor:
        """GET the catalog descriptor of an offering, resource or software."""

        url = self._resolve(self._catalog_uri, catalog_id, "catalog")
        return self._parse(CatalogDescriptor, await self._get_json(url), url)

    async def get_self_description(self, url: str) -> SelfDescription:
        """GET a participant self-description."""

        return self._parse(SelfDescription, await self._get_json(url), url)

    async def create_replica(
        self,
        endpoint: str,
        message: DataExchangeReplicaMessage,
    ) -> str | None:
        """POST the exchange to the counterpart and return the created id."""

        base_url = self._normalize_base_url(endpoint)
        if base_url is None:
            raise DataspaceClientError("Counterpart endpoint cannot be empty.")
        url = f"{base_url}{_REPLICA_PATH}"
        payload = await self._request_json(
            "POST",
            url,
            json=message.model_dump(by_alias=True, exclude_none=True),
        )
        if isinstance(payload, dict) and isinstance(payload.get("id"), str):
            return payload["id"]
        return None

    async def _get_json(self, url: str) -> Any:
        return await self._request_json("GET", url)

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                transport=self._transport,
            ) as http_client:
                response = await http_client.request(method, url, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DataspaceClientError(f"{method} {url} failed: {exc}") from exc
        self._ensure_success(response)
        try:
            return response.json()
        except ValueError as exc:
            raise DataspaceClientError(
                f"{method} {url} returned a malformed body: {exc}"
            ) from exc

    def _parse(self, model: type[_ModelT], payload: Any, url: str) -> _ModelT:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise DataspaceClientError(
                f"Unexpected {model.__name__} payload from {url}: {exc}"
            ) from exc

    def _resolve(self, base_url: str | None, reference: str, kind: str) -> str:
        normalized = reference.strip()
        if not normalized:
            raise DataspaceClientError(f"Empty {kind} reference.")
        if normalized.startswith(("http://", "https://")):
            return normalized
        if base_url is None:
            raise DataspaceClientError(
                f"Cannot resolve {kind} '{normalized}': no {kind} URI configured."
            )
        return f"{base_url}/{quote(normalized, safe='')}"

    def _ensure_success(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        message = self._detail_from_response(response)
        raise DataspaceClientError(
            f"{response.request.method} {response.request.url} failed: "
            f"{response.status_code} {message}"
        )

    def _detail_from_response(self, response: httpx.Response) -> str:
        try:
            payload = response.json()
        except ValueError:
            text = response.text.strip()
            return text or "<no response body>"

        if isinstance(payload, dict):
            for key in ("detail", "message", "error"):
                detail = payload.get(key)
                if isinstance(detail, str):
                    return detail
        return str(payload)

    def _normalize_base_url(self, base_url: str | None) -> str | None:
        if base_url is None:
            return None
        normalized = base_url.strip().rstrip("/")
        return normalized or None


__all__ = ["DataspaceClient", "DataspaceClientError"]
