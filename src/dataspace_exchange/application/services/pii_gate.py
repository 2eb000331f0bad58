"""PII compliance gate for data exchange flows."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from dataspace_exchange.domain.errors import PIIViolationError
from dataspace_exchange.domain.exchange_models import MappedResource
from dataspace_exchange.domain.ports import CatalogRegistry

logger = logging.getLogger(__name__)


class PIIComplianceGate:
    """Veto exchanges whose resources or consuming software handle PII."""

    def __init__(self, catalog: CatalogRegistry) -> None:
        self._catalog = catalog

    async def requires_pii(
        self,
        mapped_resources: Sequence[MappedResource],
        purpose_id: str,
    ) -> bool:
        """Return whether any resource or purpose software is flagged for PII.

        Software resources declared by the purpose take precedence over the
        purpose's own `usePII` flag. Every descriptor is fetched, one at a time.
        """

        flagged = False
        for mapped_resource in mapped_resources:
            descriptor = await self._catalog.get_catalog_data(mapped_resource.resource)
            if descriptor.contains_pii is True:
                logger.debug("Resource '%s' contains PII.", mapped_resource.resource)
                flagged = True

        purpose = await self._catalog.get_catalog_data(purpose_id)
        if purpose.software_resources:
            for software_resource in purpose.software_resources:
                descriptor = await self._catalog.get_catalog_data(software_resource)
                if descriptor.use_pii is True:
                    logger.debug("Software resource '%s' uses PII.", software_resource)
                    flagged = True
        elif purpose.use_pii is True:
            flagged = True

        return flagged

    async def verify(
        self,
        mapped_resources: Sequence[MappedResource],
        purpose_id: str,
    ) -> None:
        """Raise `PIIViolationError` when the exchange would involve PII."""

        if await self.requires_pii(mapped_resources, purpose_id):
            logger.warning(
                "Rejected exchange for purpose '%s': a resource uses PII.",
                purpose_id,
            )
            raise PIIViolationError(
                f"A resource or software used by purpose '{purpose_id}' uses PII."
            )


__all__ = ["PIIComplianceGate"]
