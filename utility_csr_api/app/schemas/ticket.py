"""
Pydantic schemas for support tickets opened by the voice agent.

All request fields are optional at the schema level; the service
checks the required ones itself so that a missing field produces the
same ``Missing required parameters`` message whether the ticket comes
from the REST route or from a tool call.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TicketCreate(BaseModel):
    """Schema for opening a ticket."""

    utility: Optional[str] = Field(None, example="zapco")
    account_number: Optional[str] = Field(None, example="87234-HTG-2019")
    issue_type: Optional[str] = Field(None, example="billing_dispute")
    description: Optional[str] = Field(None, example="Customer believes the meter reading is wrong")
    priority: Optional[str] = Field(None, example="high", description="Defaults to 'medium'")


class TicketRead(BaseModel):
    """Schema for a created ticket."""

    ticket_id: str = Field(..., example="TKT-1733011200000-9F3A1C")
    utility: str
    account_number: str
    issue_type: str
    description: str
    priority: str = "medium"
    status: str = "open"
    created_at: datetime
    spiritual_message: Optional[str] = None
    meditation_recommendation: Optional[str] = None
