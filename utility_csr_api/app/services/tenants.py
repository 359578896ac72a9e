"""
Tenant adapters and the tenant registry.

Each fake utility gets one ``TenantAdapter`` subclass that knows three
things about it:

* how to normalize its native fixture rows into ``Customer`` and
  ``BillingRecord`` (``snapshot``);
* how to look up customers and billing history through a
  ``RecordStore`` (``find_by_identifier``, ``find_by_phone_substring``,
  ``recent_history``);
* how to present results in the utility's own vocabulary (the
  ``format_*`` methods and ``outage_report``).

``TenantRegistry`` maps tenant codes to adapters.  Unknown codes raise
``InvalidInput`` so every operation rejects them the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from utility_csr_api.app.core.errors import InvalidInput, NotFound
from utility_csr_api.app.fixtures.aquaflow import AQUAFLOW_BILLS, AQUAFLOW_CUSTOMERS
from utility_csr_api.app.fixtures.greenleaf import GREENLEAF_BILLS, GREENLEAF_CUSTOMERS
from utility_csr_api.app.fixtures.zapco import ZAPCO_BILLS, ZAPCO_CUSTOMERS
from utility_csr_api.app.schemas.billing import BillingRecord, Customer, PaymentStatus, thaw
from utility_csr_api.app.services.record_store import RecordStore
from utility_csr_api.app.services.usage_analysis import (
    HISTORY_WINDOW,
    TrendLabel,
    TrendSummary,
    select_recent_history,
)


logger = logging.getLogger(__name__)


def _without(row: Mapping[str, Any], *keys: str) -> Dict[str, Any]:
    """Return a copy of ``row`` without the given keys."""
    return {key: value for key, value in row.items() if key not in keys}


class TenantAdapter(ABC):
    """Behaviour shared by all tenants; subclasses fill in the vocabulary."""

    code: str = ""
    name: str = ""
    utility_type: str = ""
    usage_unit: str = ""
    description: str = ""

    # Messages surfaced when a lookup matches nothing.
    customer_not_found = "Customer not found"
    meter_not_found = "No meter data found"
    usage_not_found = "No usage history found"
    bills_not_found = "No billing history found"

    # How the analysis window is described to the caller.
    cycle_word = "months"

    # Recommendation strings chosen by the usage trend.
    recommendation_field = "recommendation"
    recommendation_increasing = ""
    recommendation_normal = ""

    # ------------------------------------------------------------------
    # Fixture normalization
    # ------------------------------------------------------------------
    @abstractmethod
    def snapshot(self) -> Tuple[List[Customer], List[BillingRecord]]:
        """Return this tenant's normalized customers and billing records."""

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------
    def find_by_identifier(self, store: RecordStore, account_identifier: str) -> Customer:
        """Return the customer whose account identifier equals the input."""
        for customer in store.customers(self.code):
            if customer.account_identifier == account_identifier:
                return customer
        raise NotFound(self.customer_not_found)

    def find_by_phone_substring(self, store: RecordStore, fragment: str) -> Customer:
        """Return the first customer whose phone number contains ``fragment``."""
        for customer in store.customers(self.code):
            if fragment in customer.phone:
                return customer
        raise NotFound(self.customer_not_found)

    def recent_history(
        self,
        store: RecordStore,
        account_identifier: str,
        window_size: int = HISTORY_WINDOW,
        not_found_message: Optional[str] = None,
    ) -> List[BillingRecord]:
        """Return the most recent ``window_size`` records of an account."""
        return select_recent_history(
            account_identifier,
            store.records_for(self.code, account_identifier),
            window_size,
            not_found_message or self.bills_not_found,
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    @abstractmethod
    def format_balance(self, customer: Customer, store: RecordStore) -> Dict[str, Any]:
        """Present a customer's balance in the tenant's vocabulary."""

    @abstractmethod
    def format_meter(self, account_identifier: str, record: BillingRecord) -> Dict[str, Any]:
        """Present the meter data of the most recent bill."""

    @abstractmethod
    def format_bill_entry(self, record: BillingRecord) -> Dict[str, Any]:
        """Present one bill of the billing history."""

    @abstractmethod
    def outage_report(self, zip_code: str) -> Dict[str, Any]:
        """Return the tenant's outage status for ``zip_code``."""

    # Field names of the usage analysis payload.
    average_field = "average_monthly_usage"
    latest_field = "latest_usage"

    def recommendation_for(self, label: TrendLabel) -> str:
        if label is TrendLabel.INCREASING:
            return self.recommendation_increasing
        return self.recommendation_normal

    def format_usage_analysis(
        self,
        account_identifier: str,
        window: Sequence[BillingRecord],
        summary: TrendSummary,
    ) -> Dict[str, Any]:
        """Assemble the usage analysis payload from an already classified window."""
        return {
            "utility": self.name,
            "account_number": account_identifier,
            "records_analyzed": len(window),
            "analysis_period": f"Last {len(window)} {self.cycle_word}",
            self.average_field: summary.rounded_average,
            self.latest_field: summary.latest,
            "trend": summary.label.value,
            self.recommendation_field: self.recommendation_for(summary.label),
        }

    def format_bill_history(self, account_identifier: str, window: Sequence[BillingRecord]) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "account_number": account_identifier,
            "total_bills": len(window),
            "bills": [self.format_bill_entry(record) for record in window],
        }

    def ticket_extras(self) -> Dict[str, Any]:
        """Additional fields attached to tickets opened for this tenant."""
        return {}


class ZapCoAdapter(TenantAdapter):
    code = "zapco"
    name = "ZapCo Electric"
    utility_type = "electric"
    usage_unit = "kWh"
    description = "Portland-based electric utility with direct database access"

    recommendation_increasing = "Usage is above average. Consider energy-saving measures."
    recommendation_normal = "Usage is within normal range."

    _statuses = {
        "paid": PaymentStatus.PAID,
        "unpaid": PaymentStatus.OPEN,
        "partial": PaymentStatus.PARTIAL,
        "overdue": PaymentStatus.OVERDUE,
        "disputed": PaymentStatus.DISPUTED,
    }

    def snapshot(self) -> Tuple[List[Customer], List[BillingRecord]]:
        customers = [
            Customer(
                customer_id=row["customer_id"],
                account_identifier=row["account_number"],
                display_name=f"{row['first_name']} {row['last_name']}",
                phone=row["phone"],
                email=row["email"],
                zip_code=row["zip"],
                account_status=row["account_status"],
                current_balance=row["current_balance"],
                autopay=row["autopay_enrolled"],
                last_payment_date=row["last_payment_date"],
                last_payment_amount=row["last_payment_amount"],
                extras=_without(
                    row,
                    "customer_id", "account_number", "phone", "email", "zip", "account_status",
                    "current_balance", "autopay_enrolled", "last_payment_date", "last_payment_amount",
                ),
            )
            for row in ZAPCO_CUSTOMERS
        ]
        records = [
            BillingRecord(
                account_identifier=row["account_number"],
                bill_id=row["bill_id"],
                period_start=row["billing_period_start"],
                period_end=row["billing_period_end"],
                issue_date=row["bill_date"],
                due_date=row["due_date"],
                usage_quantity=row["kwh_used"],
                amount_due=row["total_amount_due"],
                payment_status=self._statuses[row["payment_status"]],
                status_label=row["payment_status"],
                meter_number=row["meter_number"],
                meter_reading_previous=row["meter_reading_start"],
                meter_reading_current=row["meter_reading_end"],
                extras=_without(
                    row,
                    "account_number", "bill_id", "billing_period_start", "billing_period_end",
                    "bill_date", "due_date", "kwh_used", "total_amount_due", "payment_status",
                    "meter_number", "meter_reading_start", "meter_reading_end",
                ),
            )
            for row in ZAPCO_BILLS
        ]
        return customers, records

    def format_balance(self, customer: Customer, store: RecordStore) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "customer_name": customer.display_name,
            "account_number": customer.account_identifier,
            "current_balance": customer.current_balance,
            "account_status": customer.account_status,
            "last_payment": {
                "date": customer.last_payment_date.isoformat() if customer.last_payment_date else None,
                "amount": customer.last_payment_amount,
            },
            "autopay": customer.autopay,
        }

    def format_meter(self, account_identifier: str, record: BillingRecord) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "account_number": account_identifier,
            "current_reading": record.meter_reading_current,
            "previous_reading": record.meter_reading_previous,
            "usage": record.usage_quantity,
            "read_date": record.issue_date.isoformat(),
        }

    def format_bill_entry(self, record: BillingRecord) -> Dict[str, Any]:
        return {
            "bill_date": record.issue_date.isoformat(),
            "due_date": record.due_date.isoformat(),
            "amount_due": record.amount_due,
            "kwh_used": record.usage_quantity,
            "status": record.status_label,
        }

    def outage_report(self, zip_code: str) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "zip_code": zip_code,
            "current_outages": 0,
            "affected_customers": 0,
            "estimated_restoration": None,
            "message": "No outages reported in your area",
        }


class AquaFlowAdapter(TenantAdapter):
    code = "aquaflow"
    name = "AquaFlow Municipal Water"
    utility_type = "water"
    usage_unit = "gallons"
    description = "Water utility with direct database access"

    average_field = "average_monthly_gallons"
    latest_field = "latest_usage_gallons"
    recommendation_increasing = "Water usage is above average. Consider checking for leaks."
    recommendation_normal = "Water usage is within normal range."

    _statuses = {
        "current": PaymentStatus.OPEN,
        "payment_plan": PaymentStatus.PARTIAL,
        "paid": PaymentStatus.PAID,
        "overdue": PaymentStatus.OVERDUE,
    }

    def snapshot(self) -> Tuple[List[Customer], List[BillingRecord]]:
        customers = [
            Customer(
                customer_id=row["customer_id"],
                account_identifier=row["account_number"],
                display_name=row["full_name"],
                phone=row["contact_phone"],
                email=row["contact_email"],
                zip_code=row["postal_code"],
                account_status=row["service_status"],
                current_balance=row["current_balance"],
                autopay=row["auto_payment"],
                extras=_without(
                    row,
                    "customer_id", "account_number", "full_name", "contact_phone", "contact_email",
                    "postal_code", "service_status", "current_balance", "auto_payment",
                ),
            )
            for row in AQUAFLOW_CUSTOMERS
        ]
        records = [
            BillingRecord(
                account_identifier=row["account_number"],
                bill_id=row["bill_id"],
                period_start=row["billing_start"],
                period_end=row["billing_end"],
                issue_date=row["statement_date"],
                due_date=row["due_date"],
                usage_quantity=row["water_usage_gallons"],
                amount_due=row["total_charges"],
                payment_status=self._statuses[row["payment_status"]],
                status_label=row["payment_status"],
                meter_number=row["meter_number"],
                meter_reading_previous=row["meter_reading_previous"],
                meter_reading_current=row["meter_reading_current"],
                extras=_without(
                    row,
                    "account_number", "bill_id", "billing_start", "billing_end", "statement_date",
                    "due_date", "water_usage_gallons", "total_charges", "payment_status",
                    "meter_number", "meter_reading_previous", "meter_reading_current",
                ),
            )
            for row in AQUAFLOW_BILLS
        ]
        return customers, records

    def format_balance(self, customer: Customer, store: RecordStore) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "customer_name": customer.display_name,
            "account_number": customer.account_identifier,
            "current_balance": customer.current_balance,
            "account_status": customer.account_status,
            "autopay": customer.autopay,
            "quirky_note": customer.extras.get("water_hardness_preference"),
        }

    def format_meter(self, account_identifier: str, record: BillingRecord) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "account_number": account_identifier,
            "current_reading": record.meter_reading_current,
            "previous_reading": record.meter_reading_previous,
            "usage_gallons": record.usage_quantity,
            "read_date": record.issue_date.isoformat(),
        }

    def format_bill_entry(self, record: BillingRecord) -> Dict[str, Any]:
        return {
            "bill_date": record.issue_date.isoformat(),
            "due_date": record.due_date.isoformat(),
            "amount_due": record.amount_due,
            "gallons_used": record.usage_quantity,
            "status": "Paid" if record.payment_status is PaymentStatus.PAID else "Pending",
        }

    def outage_report(self, zip_code: str) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "zip_code": zip_code,
            "service_interruptions": False,
            "maintenance_scheduled": False,
            "message": "All systems operational",
        }


class GreenLeafAdapter(TenantAdapter):
    code = "greenleaf"
    name = "GreenLeaf Energy Co."
    utility_type = "gas"
    usage_unit = "therms"
    description = "Natural gas utility with external API access"

    customer_not_found = "Customer not found in meditation records"
    meter_not_found = "No meter consciousness detected"
    usage_not_found = "No karmic energy records found"
    bills_not_found = "No energy karma records found"
    cycle_word = "lunar cycles"

    average_field = "average_monthly_therms"
    latest_field = "latest_usage_therms"
    recommendation_field = "spiritual_recommendation"
    recommendation_increasing = "Your energy consumption is rising. Consider a mindful thermostat meditation."
    recommendation_normal = "Your energy consumption aligns with natural rhythms"

    _statuses = {
        "OPEN": PaymentStatus.OPEN,
        "PAID": PaymentStatus.PAID,
        "PAST_DUE": PaymentStatus.OVERDUE,
        "DISPUTED": PaymentStatus.DISPUTED,
        "COSMIC_REVIEW": PaymentStatus.DISPUTED,
    }

    def snapshot(self) -> Tuple[List[Customer], List[BillingRecord]]:
        customers = [
            Customer(
                customer_id=row["cust_uuid"],
                account_identifier=row["acct_ref"],
                display_name=f"{row['name_first']} {row['name_last']}",
                phone=row["contact_primary_phone"],
                email=row["contact_email_primary"],
                zip_code=row["loc_zip_code"],
                account_status="active" if row["acct_state"] == "OK" else "inactive",
                current_balance=row["balance_current_cents"] / 100,
                autopay=row["billing_auto_pay"],
                extras=_without(
                    row,
                    "cust_uuid", "acct_ref", "contact_primary_phone", "contact_email_primary",
                    "loc_zip_code", "billing_auto_pay",
                ),
            )
            for row in GREENLEAF_CUSTOMERS
        ]
        # Bills point at customers by uuid; the account is the owner's acct_ref.
        accounts = {row["cust_uuid"]: row["acct_ref"] for row in GREENLEAF_CUSTOMERS}
        records = [
            BillingRecord(
                account_identifier=accounts.get(row["cust_uuid"], row["acct_ref"]),
                bill_id=row["bill_uuid"],
                period_start=row["cycle_start_date"],
                period_end=row["cycle_end_date"],
                issue_date=row["generated_date"],
                due_date=row["payment_due_date"],
                usage_quantity=row["gas_usage_therms"],
                amount_due=row["amount_total_cents"] / 100,
                payment_status=self._statuses[row["bill_status"]],
                status_label=row["bill_status"],
                meter_number=row["gas_meter_number"],
                meter_reading_previous=row["gas_meter_reading_prev"],
                meter_reading_current=row["gas_meter_reading_curr"],
                extras=_without(
                    row,
                    "acct_ref", "bill_uuid", "cycle_start_date", "cycle_end_date", "generated_date",
                    "payment_due_date", "gas_usage_therms", "bill_status", "gas_meter_number",
                    "gas_meter_reading_prev", "gas_meter_reading_curr",
                ),
            )
            for row in GREENLEAF_BILLS
        ]
        return customers, records

    def format_balance(self, customer: Customer, store: RecordStore) -> Dict[str, Any]:
        # GreenLeaf's stored balance lags; prefer the latest bill's total.
        balance = customer.current_balance
        try:
            latest = self.recent_history(store, customer.account_identifier, window_size=1)[0]
        except NotFound:
            logger.debug("No GreenLeaf bill for %s, using stored balance", customer.account_identifier)
        else:
            balance = latest.amount_due
        return {
            "utility": self.name,
            "customer_name": customer.display_name,
            "account_number": customer.account_identifier,
            "current_balance": balance,
            "account_status": customer.account_status,
            "meditation_score": customer.extras.get("meditation_score"),
            "spiritual_guidance": "Your energy flows with the universe",
            "quirky_note": f"Plant parent level: {customer.extras.get('plant_parent_level')}",
        }

    def format_meter(self, account_identifier: str, record: BillingRecord) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "account_number": account_identifier,
            "current_reading": record.meter_reading_current,
            "previous_reading": record.meter_reading_previous,
            "usage_therms": record.usage_quantity,
            "read_date": record.issue_date.isoformat(),
            "meter_mood": record.extras.get("gas_meter_reader_mood"),
            "spiritual_message": "Your energy consumption reflects inner balance",
        }

    def format_usage_analysis(
        self,
        account_identifier: str,
        window: Sequence[BillingRecord],
        summary: TrendSummary,
    ) -> Dict[str, Any]:
        payload = super().format_usage_analysis(account_identifier, window, summary)
        payload["karmic_balance"] = "harmonious"
        return payload

    def format_bill_entry(self, record: BillingRecord) -> Dict[str, Any]:
        return {
            "bill_date": record.issue_date.isoformat(),
            "due_date": record.due_date.isoformat(),
            "amount_cents": record.extras.get("amount_total_cents", round(record.amount_due * 100)),
            "therms_used": record.usage_quantity,
            "meditation_discount": record.extras.get("gas_mindfulness_discount_cents", 0) / 100,
        }

    def format_bill_history(self, account_identifier: str, window: Sequence[BillingRecord]) -> Dict[str, Any]:
        payload = super().format_bill_history(account_identifier, window)
        payload["meditation_minutes_earned"] = sum(
            record.extras.get("meditation_minutes_earned", 0) for record in window
        )
        return payload

    def outage_report(self, zip_code: str) -> Dict[str, Any]:
        return {
            "utility": self.name,
            "zip_code": zip_code,
            "energy_flow_status": "harmonious",
            "cosmic_interference": "minimal",
            "message": "The energy flows freely in your sector",
            "meditation_recommendation": "Consider an evening meditation to align with grid energy",
        }

    def ticket_extras(self) -> Dict[str, Any]:
        return {
            "spiritual_message": "Your concern has been received with mindful awareness",
            "meditation_recommendation": "Practice deep breathing while we address your needs",
        }

    def partner_record(self, customer: Customer) -> Dict[str, Any]:
        """Rebuild the customer row as GreenLeaf's own API returns it."""
        record: Dict[str, Any] = {
            "cust_uuid": customer.customer_id,
            "acct_ref": customer.account_identifier,
            "contact_primary_phone": customer.phone,
            "contact_email_primary": customer.email,
            "loc_zip_code": customer.zip_code,
            "billing_auto_pay": customer.autopay,
        }
        record.update(thaw(customer.extras))
        return record


class TenantRegistry:
    """Tenant adapters keyed by tenant code."""

    def __init__(self, adapters: Optional[Sequence[TenantAdapter]] = None) -> None:
        if adapters is None:
            adapters = (ZapCoAdapter(), AquaFlowAdapter(), GreenLeafAdapter())
        self._adapters: Dict[str, TenantAdapter] = {adapter.code: adapter for adapter in adapters}

    def __iter__(self) -> Iterator[TenantAdapter]:
        return iter(self._adapters.values())

    def codes(self) -> List[str]:
        return list(self._adapters)

    def get(self, code: Optional[str]) -> TenantAdapter:
        """Return the adapter for ``code`` or raise ``InvalidInput``."""
        adapter = self._adapters.get(code or "")
        if adapter is None:
            raise InvalidInput("Invalid utility specified")
        return adapter
