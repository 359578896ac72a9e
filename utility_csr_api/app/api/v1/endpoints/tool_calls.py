"""
Tool‑call webhook for the voice platform.

The platform posts all tool calls of a conversation turn to a single
URL.  Each call is dispatched to the matching CSR operation and the
replies are returned as ``{"results": [{"toolCallId", "result"}]}``.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from utility_csr_api.app.api.deps import get_tool_call_service
from utility_csr_api.app.schemas.tool_call import ToolCallRequest, ToolCallResponse
from utility_csr_api.app.services.tool_call_service import ToolCallService

router = APIRouter()


@router.post("/tool-calls", response_model=ToolCallResponse, summary="Voice platform tool-call webhook")
async def handle_tool_calls(
    request_in: ToolCallRequest,
    service: ToolCallService = Depends(get_tool_call_service),
) -> JSONResponse:
    response, status_code = service.run_all(request_in.message.toolCalls)
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json"))
