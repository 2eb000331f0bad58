"""Application services public API."""

from dataspace_exchange.application.services.data_exchange_service import (
    DataExchangeService,
    ExchangeFlowResult,
)
from dataspace_exchange.application.services.pii_gate import PIIComplianceGate

__all__ = ["DataExchangeService", "ExchangeFlowResult", "PIIComplianceGate"]
