"""Tests for the SQLite schema, seeding and the SQLite record store."""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from utility_csr_api.app.core.config import Settings
from utility_csr_api.app.core.db import MIGRATIONS, get_database_path, init_db, seed_db
from utility_csr_api.app.main import create_app
from utility_csr_api.app.services.csr_service import CSRService
from utility_csr_api.app.services.record_store import (
    InMemoryRecordStore,
    SQLiteRecordStore,
    build_record_store,
)


def count(path, table):
    conn = sqlite3.connect(path)
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


def test_migrations_are_recorded(sqlite_path):
    assert count(sqlite_path, "migrations") == len(MIGRATIONS)
    assert count(sqlite_path, "tenants") == 3


def test_init_and_seed_are_idempotent(sqlite_path, registry):
    before = (count(sqlite_path, "customers"), count(sqlite_path, "bills"))
    init_db(sqlite_path)
    seed_db(registry, sqlite_path)
    assert (count(sqlite_path, "customers"), count(sqlite_path, "bills")) == before


def test_seed_matches_fixture_counts(sqlite_path, memory_store, registry):
    expected_customers = sum(len(memory_store.customers(code)) for code in registry.codes())
    assert count(sqlite_path, "customers") == expected_customers


def test_relative_database_path_is_absolute():
    assert get_database_path("utility_csr.db").endswith("utility_csr.db")
    assert get_database_path("/tmp/x.db") == "/tmp/x.db"


class TestSQLiteRecordStore:
    def test_customers_keep_fixture_order(self, sqlite_path, memory_store):
        store = SQLiteRecordStore(sqlite_path)
        for code in ("zapco", "aquaflow", "greenleaf"):
            assert [c.account_identifier for c in store.customers(code)] == [
                c.account_identifier for c in memory_store.customers(code)
            ]

    def test_records_round_trip(self, sqlite_path, memory_store):
        store = SQLiteRecordStore(sqlite_path)
        stored = store.records_for("greenleaf", "GLE-2019-PHX-0847")
        expected = memory_store.records_for("greenleaf", "GLE-2019-PHX-0847")
        assert [r.bill_id for r in stored] == [r.bill_id for r in expected]
        assert [r.usage_quantity for r in stored] == [127, 124, 118]
        assert stored[0].issue_date == expected[0].issue_date
        assert stored[0].payment_status is expected[0].payment_status
        assert stored[0].extras["gas_meter_reader_mood"] == "one_with_nature"

    @pytest.mark.parametrize(
        "utility, account",
        [("zapco", "87234-HTG-2019"), ("aquaflow", "AQF-2019-VGN-9247"), ("greenleaf", "GLE-2019-PHX-0847")],
    )
    def test_same_answers_as_memory_store(self, sqlite_path, memory_store, registry, utility, account):
        sqlite_service = CSRService(SQLiteRecordStore(sqlite_path), registry)
        memory_service = CSRService(memory_store, registry)
        assert sqlite_service.analyze_meter(utility, account) == memory_service.analyze_meter(utility, account)
        assert sqlite_service.analyze_bills(utility, account) == memory_service.analyze_bills(utility, account)


class TestBuildRecordStore:
    def test_memory(self, registry):
        assert isinstance(build_record_store(Settings(record_store="memory"), registry), InMemoryRecordStore)

    def test_sqlite(self, registry, tmp_path):
        path = str(tmp_path / "built.db")
        store = build_record_store(Settings(record_store="sqlite", database_url=path), registry)
        assert isinstance(store, SQLiteRecordStore)
        assert store.db_path == path

    def test_unknown(self, registry):
        with pytest.raises(ValueError):
            build_record_store(Settings(record_store="redis"), registry)


def test_app_seeds_sqlite_on_startup(tmp_path):
    path = str(tmp_path / "startup.db")
    app = create_app(config=Settings(record_store="sqlite", database_url=path))
    with TestClient(app) as client:
        response = client.get(
            "/csr-utilities/analyze-meter", params={"utility": "zapco", "account_number": "87234-HTG-2019"}
        )
    assert response.status_code == 200
    assert response.json()["average_monthly_usage"] == 883
