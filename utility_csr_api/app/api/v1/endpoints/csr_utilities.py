"""
CSR tool endpoints for API v1.

These routes are the tools the voice agent calls during a customer
conversation.  Query parameters are declared optional so that missing
values reach the service, which answers with the
``Missing required parameters`` message the agent prompt expects.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from utility_csr_api.app.api.deps import get_csr_service
from utility_csr_api.app.schemas.ticket import TicketCreate, TicketRead
from utility_csr_api.app.services.csr_service import CSRService

router = APIRouter()


@router.get("/check-balance", response_model=Dict[str, Any], summary="Check account balance")
async def check_balance(
    utility: Optional[str] = Query(None, description="Tenant code: zapco, aquaflow or greenleaf"),
    identifier: Optional[str] = Query(None, description="'phone' or 'account_number'"),
    value: Optional[str] = Query(None, description="Phone fragment or account number"),
    service: CSRService = Depends(get_csr_service),
) -> Dict[str, Any]:
    """Return balance and account status for a customer.

    With ``identifier=phone`` the first customer whose phone number
    contains ``value`` is returned; otherwise ``value`` must equal the
    account number.
    """
    return service.check_balance(utility, identifier, value)


@router.get("/check-outages", response_model=Dict[str, Any], summary="Check outage map")
async def check_outages(
    utility: Optional[str] = Query(None),
    zip_code: Optional[str] = Query(None),
    service: CSRService = Depends(get_csr_service),
) -> Dict[str, Any]:
    return service.check_outages(utility, zip_code)


@router.get("/check-meter", response_model=Dict[str, Any], summary="Check current meter")
async def check_meter(
    utility: Optional[str] = Query(None),
    account_number: Optional[str] = Query(None),
    service: CSRService = Depends(get_csr_service),
) -> Dict[str, Any]:
    """Return readings from the account's most recent bill."""
    return service.check_meter(utility, account_number)


@router.get("/analyze-meter", response_model=Dict[str, Any], summary="Analyze usage trend")
async def analyze_meter(
    utility: Optional[str] = Query(None),
    account_number: Optional[str] = Query(None),
    service: CSRService = Depends(get_csr_service),
) -> Dict[str, Any]:
    """Compare the latest usage with the recent average.

    The trend is ``increasing`` when the latest cycle is more than 10%
    above the average of the last six cycles, ``decreasing`` when more
    than 10% below, ``stable`` otherwise.
    """
    return service.analyze_meter(utility, account_number)


@router.get("/analyze-bills", response_model=Dict[str, Any], summary="Analyze billing history")
async def analyze_bills(
    utility: Optional[str] = Query(None),
    account_number: Optional[str] = Query(None),
    service: CSRService = Depends(get_csr_service),
) -> Dict[str, Any]:
    """Return the account's most recent bills, newest first."""
    return service.analyze_bills(utility, account_number)


@router.post(
    "/create-ticket",
    response_model=TicketRead,
    response_model_exclude_none=True,
    summary="Open a support ticket",
)
async def create_ticket(
    ticket_in: TicketCreate,
    service: CSRService = Depends(get_csr_service),
) -> TicketRead:
    """Open a ticket; ``priority`` defaults to ``medium``."""
    return service.create_ticket(ticket_in)
