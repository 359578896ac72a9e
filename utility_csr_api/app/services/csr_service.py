"""
Service layer for the customer‑service (CSR) tools.

``CSRService`` implements the six tools the voice agent calls:
balance lookup, outage check, meter lookup, usage analysis, billing
history and ticket creation.  Every operation resolves the tenant
through the ``TenantRegistry`` and reads through the injected
``RecordStore``; nothing here knows which utility it is talking to.

Operations either return a payload dictionary or raise one of the
service errors from ``core.errors``.  The API layer maps those to HTTP
responses.
"""

from __future__ import annotations

import logging
import secrets
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from utility_csr_api.app.core.errors import require_params
from utility_csr_api.app.schemas.ticket import TicketCreate, TicketRead
from utility_csr_api.app.services.record_store import RecordStore
from utility_csr_api.app.services.tenants import TenantRegistry
from utility_csr_api.app.services.usage_analysis import HISTORY_WINDOW, TREND_BAND, classify_trend


logger = logging.getLogger(__name__)


def generate_ticket_id() -> str:
    """Return ``TKT-<epoch millis>-<6 hex chars>``; unique in practice only."""
    return f"TKT-{int(time.time() * 1000)}-{secrets.token_hex(3).upper()}"


class CSRService:
    """Customer‑service operations over a read‑only record store."""

    def __init__(
        self,
        store: RecordStore,
        registry: Optional[TenantRegistry] = None,
        window_size: int = HISTORY_WINDOW,
        trend_band: float = TREND_BAND,
    ) -> None:
        self.store = store
        self.registry = registry or TenantRegistry()
        self.window_size = window_size
        self.trend_band = trend_band

    def check_balance(self, utility: Optional[str], identifier: Optional[str], value: Optional[str]) -> Dict[str, Any]:
        """Look up a customer by phone fragment or account number.

        ``identifier == "phone"`` matches the first customer whose phone
        contains ``value``; any other identifier kind is treated as an
        exact account number match.
        """
        require_params(utility=utility, identifier=identifier, value=value)
        adapter = self.registry.get(utility)
        logger.debug("Balance lookup on %s by %s", adapter.code, identifier)
        if identifier == "phone":
            customer = adapter.find_by_phone_substring(self.store, value)
        else:
            customer = adapter.find_by_identifier(self.store, value)
        return adapter.format_balance(customer, self.store)

    def check_outages(self, utility: Optional[str], zip_code: Optional[str]) -> Dict[str, Any]:
        require_params(utility=utility, zip_code=zip_code)
        return self.registry.get(utility).outage_report(zip_code)

    def check_meter(self, utility: Optional[str], account_number: Optional[str]) -> Dict[str, Any]:
        """Return meter readings from the account's most recent bill."""
        require_params(utility=utility, account_number=account_number)
        adapter = self.registry.get(utility)
        latest = adapter.recent_history(self.store, account_number, 1, adapter.meter_not_found)[0]
        return adapter.format_meter(account_number, latest)

    def analyze_meter(self, utility: Optional[str], account_number: Optional[str]) -> Dict[str, Any]:
        """Classify the usage trend over the account's recent billing cycles."""
        require_params(utility=utility, account_number=account_number)
        adapter = self.registry.get(utility)
        window = adapter.recent_history(self.store, account_number, self.window_size, adapter.usage_not_found)
        summary = classify_trend(window, self.trend_band)
        logger.debug(
            "Usage trend for %s/%s over %s cycles: %s (latest=%s, mean=%.2f)",
            adapter.code, account_number, len(window), summary.label.value, summary.latest, summary.average,
        )
        return adapter.format_usage_analysis(account_number, window, summary)

    def analyze_bills(self, utility: Optional[str], account_number: Optional[str]) -> Dict[str, Any]:
        """Return the account's recent billing history."""
        require_params(utility=utility, account_number=account_number)
        adapter = self.registry.get(utility)
        window = adapter.recent_history(self.store, account_number, self.window_size, adapter.bills_not_found)
        return adapter.format_bill_history(account_number, window)

    def create_ticket(self, data: TicketCreate) -> TicketRead:
        """Open a support ticket.

        Tickets are not persisted and are not checked against the record
        store; only the utility code must be known.
        """
        require_params(
            utility=data.utility,
            account_number=data.account_number,
            issue_type=data.issue_type,
            description=data.description,
        )
        adapter = self.registry.get(data.utility)
        ticket = TicketRead(
            ticket_id=generate_ticket_id(),
            utility=adapter.code,
            account_number=data.account_number,
            issue_type=data.issue_type,
            description=data.description,
            priority=data.priority or "medium",
            status="open",
            created_at=datetime.now(timezone.utc),
            **adapter.ticket_extras(),
        )
        logger.info("Opened ticket %s for %s/%s (%s)", ticket.ticket_id, adapter.code, data.account_number, data.issue_type)
        return ticket
