"""Health check endpoint."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from utility_csr_api.app.api.deps import get_registry
from utility_csr_api.app.services.tenants import TenantRegistry

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(request: Request, registry: TenantRegistry = Depends(get_registry)) -> Dict[str, Any]:
    """Report service status, the mounted route groups and known tenants."""
    prefix = request.app.state.api_prefix
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
        "tenants": registry.codes(),
        "endpoints": {
            "csr_utilities": f"{prefix}/csr-utilities/*",
            "greenleaf_mock": f"{prefix}/greenleaf/*",
        },
    }
