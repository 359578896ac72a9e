"""
Unified customer and billing models.

Each utility stores its data in its own vocabulary (``kwh_used``,
``water_usage_gallons``, ``gas_usage_therms`` ...).  The tenant
adapters normalize those rows into the models below when the record
store is built, so that lookups, history selection and trend analysis
work on a single shape.  Tenant‑specific fields that have no unified
counterpart travel along in ``extras`` and are only read again by the
tenant's own formatter.

Instances are frozen: the store is a snapshot and nothing downstream
may change it.
"""

from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Annotated, Any, Mapping, Optional, Union

from pydantic import AfterValidator, BaseModel, Field, PlainSerializer, model_validator


Number = Union[int, float]


def freeze(value: Any) -> Any:
    """Return ``value`` with every nested dict read-only and every list a tuple."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: plain dicts and lists, e.g. for ``json.dumps``."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return value


# Tenant-specific leftovers; read-only so the snapshot cannot drift.
Extras = Annotated[Mapping[str, Any], AfterValidator(freeze), PlainSerializer(thaw)]


class PaymentStatus(str, Enum):
    """Normalized bill lifecycle: open -> paid, or open -> overdue/disputed."""

    OPEN = "open"
    PARTIAL = "partial"
    PAID = "paid"
    OVERDUE = "overdue"
    DISPUTED = "disputed"


class Customer(BaseModel):
    """A utility customer account, as used by point lookups."""

    model_config = {"frozen": True}

    customer_id: str
    account_identifier: str
    display_name: str
    phone: str
    email: Optional[str] = None
    zip_code: Optional[str] = None
    account_status: str
    current_balance: float = Field(..., description="Balance in dollars")
    autopay: bool = False
    last_payment_date: Optional[date] = None
    last_payment_amount: Optional[float] = None
    extras: Extras = Field(default_factory=dict, validate_default=True)


class BillingRecord(BaseModel):
    """One billing cycle of one account."""

    model_config = {"frozen": True}

    account_identifier: str
    bill_id: str
    period_start: date
    period_end: date
    issue_date: date
    due_date: date
    usage_quantity: Number = Field(..., ge=0, description="kWh, gallons or therms depending on tenant")
    amount_due: float = Field(..., description="Amount in dollars; opaque")
    payment_status: PaymentStatus
    status_label: str = Field(..., description="Status in the tenant's own vocabulary")
    meter_number: Optional[str] = None
    meter_reading_previous: Optional[Number] = None
    meter_reading_current: Optional[Number] = None
    extras: Extras = Field(default_factory=dict, validate_default=True)

    @model_validator(mode="after")
    def check_period(self) -> "BillingRecord":
        if self.period_end < self.period_start:
            raise ValueError("period_end must not be before period_start")
        return self
