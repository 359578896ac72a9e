"""
Main entrypoint for the utility customer‑service API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the record store and the versioned router.  ``create_app``
builds and configures the app, which is then instantiated at module
import time as ``app`` so it can be served with uvicorn::

    uvicorn utility_csr_api.app.main:app --reload

Pass ``record_store`` to ``create_app`` to serve different data, e.g.
fixture rows in tests.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Settings, settings
from .core.db import init_db, seed_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.csr_service import CSRService
from .services.record_store import RecordStore, SQLiteRecordStore, build_record_store
from .services.tenants import TenantRegistry
from .services.tool_call_service import ToolCallService


logger = logging.getLogger(__name__)


def create_app(record_store: Optional[RecordStore] = None, config: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    record_store : Optional[RecordStore]
        Data provider for all lookups.  Defaults to the store selected
        by ``config.record_store``.
    config : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Logging first so that store construction below can log.
    setup_logging(config.log_level, config.log_file or None)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    registry = TenantRegistry()
    store = record_store or build_record_store(config, registry)
    csr_service = CSRService(
        store,
        registry,
        window_size=config.history_window,
        trend_band=config.trend_band,
    )
    app.state.csr_service = csr_service
    app.state.tool_call_service = ToolCallService(csr_service)
    app.state.api_prefix = config.api_prefix

    app.include_router(v1_router, prefix=config.api_prefix)

    if isinstance(store, SQLiteRecordStore):
        @app.on_event("startup")
        async def startup_event() -> None:
            # Create the database file if needed and load the fixtures.
            init_db(store.db_path)
            seed_db(registry, store.db_path)

    logger.info("%s %s ready (%s store)", config.project_name, config.api_version, type(store).__name__)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
