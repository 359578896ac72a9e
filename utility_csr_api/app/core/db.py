"""
SQLite database integration and simple migration system.

The SQLite record store is optional: by default the service answers
from the in‑memory fixture snapshot.  When ``RECORD_STORE=sqlite`` the
application applies migrations (``init_db``) and loads the fixtures
(``seed_db``) at startup, then reads from the database file.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.  Seeding
uses ``INSERT OR IGNORE`` keyed by tenant and customer/bill id, so it
can run on every start without duplicating rows.
"""

import json
import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from .config import settings
from ..schemas.billing import thaw

if TYPE_CHECKING:
    from utility_csr_api.app.services.tenants import TenantRegistry


logger = logging.getLogger(__name__)


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: tenants, customers and bills
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS tenants (
            code TEXT PRIMARY KEY,
            name TEXT NOT NULL,
            utility_type TEXT NOT NULL,
            usage_unit TEXT NOT NULL,
            description TEXT
        );

        CREATE TABLE IF NOT EXISTS customers (
            tenant_code TEXT NOT NULL,
            customer_id TEXT NOT NULL,
            account_identifier TEXT NOT NULL,
            display_name TEXT NOT NULL,
            phone TEXT NOT NULL,
            email TEXT,
            zip_code TEXT,
            account_status TEXT NOT NULL,
            current_balance REAL NOT NULL DEFAULT 0,
            autopay INTEGER NOT NULL DEFAULT 0,
            last_payment_date TEXT,
            last_payment_amount REAL,
            extras TEXT,
            PRIMARY KEY (tenant_code, customer_id),
            FOREIGN KEY(tenant_code) REFERENCES tenants(code)
        );

        CREATE TABLE IF NOT EXISTS bills (
            tenant_code TEXT NOT NULL,
            bill_id TEXT NOT NULL,
            account_identifier TEXT NOT NULL,
            period_start TEXT NOT NULL,
            period_end TEXT NOT NULL,
            issue_date TEXT NOT NULL,
            due_date TEXT NOT NULL,
            usage_quantity NUMERIC NOT NULL,
            amount_due REAL NOT NULL,
            payment_status TEXT NOT NULL,
            status_label TEXT NOT NULL,
            meter_number TEXT,
            meter_reading_previous NUMERIC,
            meter_reading_current NUMERIC,
            extras TEXT,
            PRIMARY KEY (tenant_code, bill_id),
            FOREIGN KEY(tenant_code) REFERENCES tenants(code)
        );
        """,
    ),
    # Migration 2: index used by account history reads
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_bills_account
            ON bills (tenant_code, account_identifier);
        """,
    ),
]


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the configured path is absolute, use it directly.  Otherwise
    resolve it relative to the project root.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  Dates are stored and returned as ISO strings.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and commits/closes on exit."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Initialise the database and apply pending migrations."""
    with get_cursor(db_path) as cursor:
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        current = cursor.execute("SELECT COALESCE(MAX(version), 0) FROM migrations").fetchone()[0]
        for version, script in MIGRATIONS:
            if version <= current:
                continue
            cursor.executescript(script)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            logger.info("Applied migration %s", version)


def seed_db(registry: "TenantRegistry", db_path: Optional[str] = None) -> None:
    """Load every tenant's fixture snapshot into the database."""
    with get_cursor(db_path) as cursor:
        for adapter in registry:
            cursor.execute(
                """
                INSERT OR IGNORE INTO tenants (code, name, utility_type, usage_unit, description)
                VALUES (?, ?, ?, ?, ?)
                """,
                (adapter.code, adapter.name, adapter.utility_type, adapter.usage_unit, adapter.description),
            )
            customers, records = adapter.snapshot()
            for customer in customers:
                cursor.execute(
                    """
                    INSERT OR IGNORE INTO customers (
                        tenant_code, customer_id, account_identifier, display_name, phone, email,
                        zip_code, account_status, current_balance, autopay, last_payment_date,
                        last_payment_amount, extras
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        adapter.code,
                        customer.customer_id,
                        customer.account_identifier,
                        customer.display_name,
                        customer.phone,
                        customer.email,
                        customer.zip_code,
                        customer.account_status,
                        customer.current_balance,
                        int(customer.autopay),
                        customer.last_payment_date.isoformat() if customer.last_payment_date else None,
                        customer.last_payment_amount,
                        json.dumps(thaw(customer.extras)),
                    ),
                )
            for record in records:
                cursor.execute(
                    """
                    INSERT OR IGNORE INTO bills (
                        tenant_code, bill_id, account_identifier, period_start, period_end,
                        issue_date, due_date, usage_quantity, amount_due, payment_status,
                        status_label, meter_number, meter_reading_previous, meter_reading_current,
                        extras
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        adapter.code,
                        record.bill_id,
                        record.account_identifier,
                        record.period_start.isoformat(),
                        record.period_end.isoformat(),
                        record.issue_date.isoformat(),
                        record.due_date.isoformat(),
                        record.usage_quantity,
                        record.amount_due,
                        record.payment_status.value,
                        record.status_label,
                        record.meter_number,
                        record.meter_reading_previous,
                        record.meter_reading_current,
                        json.dumps(thaw(record.extras)),
                    ),
                )
            logger.info(
                "Seeded tenant %s: %s customers, %s bills", adapter.code, len(customers), len(records)
            )
