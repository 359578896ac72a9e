"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under one prefix.  The CSR
tools and the tool‑call webhook share ``/csr-utilities``; the GreenLeaf
partner mock lives under ``/greenleaf``.
"""

from fastapi import APIRouter

from .endpoints import csr_utilities, greenleaf, health, tool_calls

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(csr_utilities.router, prefix="/csr-utilities", tags=["csr-utilities"])
router.include_router(tool_calls.router, prefix="/csr-utilities", tags=["tool-calls"])
router.include_router(greenleaf.router, prefix="/greenleaf", tags=["greenleaf"])
