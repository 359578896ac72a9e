"""
Envelope models for the voice platform's tool‑call webhook.

The platform posts a message holding one or more tool calls; each
call names a function and its arguments (either an object or a JSON
encoded string).  The reply is a list of results, each tagged with
the id of the tool call it answers.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ToolArguments(BaseModel):
    """Arguments accepted by the CSR tools.

    Voice platforms sometimes send numbers for phone fragments, zip
    codes or account numbers; those are converted to strings.  Other
    non-string values are rejected.
    """

    model_config = {"coerce_numbers_to_str": True}

    utility: Optional[str] = None
    identifier: Optional[str] = None
    value: Optional[str] = None
    zip_code: Optional[str] = None
    account_number: Optional[str] = None
    issue_type: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None


class ToolFunction(BaseModel):
    name: str
    arguments: Union[Dict[str, Any], str, None] = None


class ToolCall(BaseModel):
    id: str = Field(..., description="Opaque call‑correlation id chosen by the platform")
    type: Optional[str] = "function"
    function: ToolFunction


class ToolCallMessage(BaseModel):
    type: Optional[str] = None
    toolCalls: List[ToolCall] = Field(default_factory=list)


class ToolCallRequest(BaseModel):
    message: ToolCallMessage


class ToolCallResult(BaseModel):
    toolCallId: str
    result: Any


class ToolCallResponse(BaseModel):
    results: List[ToolCallResult]
