"""
Service layer abstraction.

``usage_analysis`` holds the history selection and trend logic,
``record_store`` the read‑only data providers, ``tenants`` the
per‑utility adapters and ``csr_service`` / ``tool_call_service`` the
operations exposed over HTTP.  API handlers only call into services,
so the data source can change without touching them.
"""
