"""
Read‑only record stores.

A record store answers two questions for a tenant: which customers it
has, and which billing records belong to a given account.  Everything
above this layer (lookups, history selection, formatting) only talks to
the ``RecordStore`` interface, so tests can hand the application a
store built from their own fixture rows.

Two implementations are provided:

* ``InMemoryRecordStore`` holds a frozen snapshot of normalized
  customers and records.  This is the default.
* ``SQLiteRecordStore`` reads the same data from the SQLite file
  created and seeded by ``core.db``.  Connections are opened per read
  and closed immediately.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from utility_csr_api.app.core.db import get_connection, get_database_path
from utility_csr_api.app.schemas.billing import BillingRecord, Customer

if TYPE_CHECKING:
    from utility_csr_api.app.core.config import Settings
    from utility_csr_api.app.services.tenants import TenantRegistry


logger = logging.getLogger(__name__)


class RecordStore(ABC):
    """Capability: given tenant (+ account), return its records."""

    @abstractmethod
    def customers(self, tenant_code: str) -> Sequence[Customer]:
        """Return every customer of ``tenant_code`` in insertion order."""

    @abstractmethod
    def records_for(self, tenant_code: str, account_identifier: str) -> Sequence[BillingRecord]:
        """Return every billing record of one account, unwindowed and unsorted."""


class InMemoryRecordStore(RecordStore):
    """Frozen, in‑memory snapshot of customers and billing records."""

    def __init__(
        self,
        data: Mapping[str, Tuple[Iterable[Customer], Iterable[BillingRecord]]],
    ) -> None:
        customers: Dict[str, Tuple[Customer, ...]] = {}
        records: Dict[str, Tuple[BillingRecord, ...]] = {}
        for tenant_code, (tenant_customers, tenant_records) in data.items():
            customers[tenant_code] = tuple(tenant_customers)
            records[tenant_code] = tuple(tenant_records)
        self._customers = MappingProxyType(customers)
        self._records = MappingProxyType(records)

    @classmethod
    def from_registry(cls, registry: "TenantRegistry") -> "InMemoryRecordStore":
        """Build the store from every registered tenant's fixture rows."""
        store = cls({adapter.code: adapter.snapshot() for adapter in registry})
        logger.info(
            "Loaded in-memory record store: %s",
            ", ".join(
                f"{code}={len(store._customers[code])} customers/{len(store._records[code])} bills"
                for code in store._customers
            ),
        )
        return store

    def customers(self, tenant_code: str) -> Sequence[Customer]:
        return self._customers.get(tenant_code, ())

    def records_for(self, tenant_code: str, account_identifier: str) -> Sequence[BillingRecord]:
        return tuple(
            record
            for record in self._records.get(tenant_code, ())
            if record.account_identifier == account_identifier
        )


class SQLiteRecordStore(RecordStore):
    """Record store reading from the seeded SQLite database.

    ``rowid`` ordering preserves the fixture insertion order, which the
    history selector relies on to break issue‑date ties.
    """

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def customers(self, tenant_code: str) -> Sequence[Customer]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                "SELECT * FROM customers WHERE tenant_code = ? ORDER BY rowid",
                (tenant_code,),
            ).fetchall()
            return tuple(self._row_to_customer(row) for row in rows)
        finally:
            conn.close()

    def records_for(self, tenant_code: str, account_identifier: str) -> Sequence[BillingRecord]:
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                "SELECT * FROM bills WHERE tenant_code = ? AND account_identifier = ? ORDER BY rowid",
                (tenant_code, account_identifier),
            ).fetchall()
            return tuple(self._row_to_record(row) for row in rows)
        finally:
            conn.close()

    @staticmethod
    def _row_to_customer(row: sqlite3.Row) -> Customer:
        return Customer(
            customer_id=row["customer_id"],
            account_identifier=row["account_identifier"],
            display_name=row["display_name"],
            phone=row["phone"],
            email=row["email"],
            zip_code=row["zip_code"],
            account_status=row["account_status"],
            current_balance=row["current_balance"],
            autopay=bool(row["autopay"]),
            last_payment_date=row["last_payment_date"],
            last_payment_amount=row["last_payment_amount"],
            extras=json.loads(row["extras"]) if row["extras"] else {},
        )

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> BillingRecord:
        return BillingRecord(
            account_identifier=row["account_identifier"],
            bill_id=row["bill_id"],
            period_start=row["period_start"],
            period_end=row["period_end"],
            issue_date=row["issue_date"],
            due_date=row["due_date"],
            usage_quantity=row["usage_quantity"],
            amount_due=row["amount_due"],
            payment_status=row["payment_status"],
            status_label=row["status_label"],
            meter_number=row["meter_number"],
            meter_reading_previous=row["meter_reading_previous"],
            meter_reading_current=row["meter_reading_current"],
            extras=json.loads(row["extras"]) if row["extras"] else {},
        )


def build_record_store(config: "Settings", registry: "TenantRegistry") -> RecordStore:
    """Create the record store selected by ``config.record_store``."""
    kind = config.record_store.lower()
    if kind == "memory":
        return InMemoryRecordStore.from_registry(registry)
    if kind == "sqlite":
        return SQLiteRecordStore(get_database_path(config.database_url))
    raise ValueError(f"Unknown RECORD_STORE '{config.record_store}'; expected 'memory' or 'sqlite'")
