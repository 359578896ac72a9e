"""
GreenLeaf partner API mock.

GreenLeaf is modelled as an external partner with its own API.  These
routes imitate that API so integrations can be tested against it; they
return customer rows in GreenLeaf's native field names.  Phone lookups
here require an exact match, unlike the CSR balance tool.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from utility_csr_api.app.api.deps import get_csr_service
from utility_csr_api.app.core.errors import NotFound, require_params
from utility_csr_api.app.services.csr_service import CSRService

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def greenleaf_health() -> Dict[str, Any]:
    return {
        "status": "ENLIGHTENED",
        "message": "GreenLeaf Energy API is flowing smoothly",
        "meditation_sessions_completed": 89,
        "api_mood": "serene",
    }


@router.get("/api/v2/customer/lookup/by-phone", response_model=Dict[str, Any])
async def lookup_by_phone(
    phone: Optional[str] = Query(None, description="Primary phone number, exact match"),
    service: CSRService = Depends(get_csr_service),
) -> Dict[str, Any]:
    require_params(phone=phone)
    adapter = service.registry.get("greenleaf")
    for customer in service.store.customers(adapter.code):
        if customer.phone == phone:
            record = adapter.partner_record(customer)
            record["meditation_bonus"] = "+5 mindfulness points for account lookup"
            return record
    raise NotFound(
        "Customer consciousness not detected",
        {"meditation_recommendation": "Perhaps meditate on the correct phone number"},
    )
