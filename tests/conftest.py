"""Shared pytest fixtures for the utility CSR API tests.

Fixtures included:
- Data: registry, memory_store, make_record
- Services: csr_service
- HTTP: app, client (FastAPI TestClient over the in-memory store)
- SQLite: sqlite_path (migrated and seeded database file)
"""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from utility_csr_api.app.core.db import init_db, seed_db
from utility_csr_api.app.main import create_app
from utility_csr_api.app.schemas.billing import BillingRecord, PaymentStatus
from utility_csr_api.app.services.csr_service import CSRService
from utility_csr_api.app.services.record_store import InMemoryRecordStore
from utility_csr_api.app.services.tenants import TenantRegistry


# =============================================================================
# Helper Functions
# =============================================================================


def build_record(account="ACC-1", issue_date=date(2024, 11, 1), usage=100, bill_id=None, **overrides):
    """Create a BillingRecord with sensible defaults around ``issue_date``."""
    if isinstance(issue_date, str):
        issue_date = date.fromisoformat(issue_date)
    fields = {
        "account_identifier": account,
        "bill_id": bill_id or f"B-{account}-{issue_date.isoformat()}",
        "period_start": issue_date - timedelta(days=31),
        "period_end": issue_date - timedelta(days=1),
        "issue_date": issue_date,
        "due_date": issue_date + timedelta(days=24),
        "usage_quantity": usage,
        "amount_due": 100.0,
        "payment_status": PaymentStatus.OPEN,
        "status_label": "unpaid",
    }
    fields.update(overrides)
    return BillingRecord(**fields)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def registry():
    return TenantRegistry()


@pytest.fixture
def memory_store(registry):
    return InMemoryRecordStore.from_registry(registry)


@pytest.fixture
def csr_service(memory_store, registry):
    return CSRService(memory_store, registry)


@pytest.fixture
def app(memory_store):
    return create_app(record_store=memory_store)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def sqlite_path(tmp_path, registry):
    path = str(tmp_path / "utility_csr_test.db")
    init_db(path)
    seed_db(registry, path)
    return path
