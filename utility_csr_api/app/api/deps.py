"""
FastAPI dependencies shared by the endpoint modules.

Services are built once in ``create_app`` and stored on
``app.state``; these helpers hand them to route functions.  Tests can
replace them with ``app.dependency_overrides``.
"""

from fastapi import Request

from utility_csr_api.app.services.csr_service import CSRService
from utility_csr_api.app.services.tenants import TenantRegistry
from utility_csr_api.app.services.tool_call_service import ToolCallService


def get_csr_service(request: Request) -> CSRService:
    return request.app.state.csr_service


def get_tool_call_service(request: Request) -> ToolCallService:
    return request.app.state.tool_call_service


def get_registry(request: Request) -> TenantRegistry:
    return request.app.state.csr_service.registry
