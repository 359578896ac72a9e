"""
Dispatch of voice‑platform tool calls to CSR operations.

The platform posts tool calls by function name.  Names are accepted in
snake_case, kebab-case or camelCase (``check_balance``,
``check-balance``, ``checkBalance``) and mapped to the matching
``CSRService`` method.  Each call is answered independently: a failure
in one call is reported inside its own result and does not affect the
others.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, Dict, List, Tuple

from fastapi import status
from pydantic import ValidationError

from utility_csr_api.app.core.errors import InvalidInput, ServiceError
from utility_csr_api.app.schemas.ticket import TicketCreate
from utility_csr_api.app.schemas.tool_call import ToolArguments, ToolCall, ToolCallResponse, ToolCallResult
from utility_csr_api.app.services.csr_service import CSRService


logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def normalize_tool_name(name: str) -> str:
    """Return ``name`` as snake_case: ``checkBalance`` -> ``check_balance``."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).replace("-", "_").lower()


def parse_arguments(raw: Any) -> ToolArguments:
    """Return tool call arguments; strings are decoded as JSON first."""
    if raw is None or raw == "":
        raw = {}
    elif not isinstance(raw, dict):
        try:
            raw = json.loads(raw)
        except (TypeError, ValueError):
            raise InvalidInput("Tool call arguments must be a JSON object")
        if not isinstance(raw, dict):
            raise InvalidInput("Tool call arguments must be a JSON object")
    try:
        return ToolArguments.model_validate(raw)
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error.get("loc")})
        raise InvalidInput(f"Tool call arguments must be strings: {', '.join(fields)}")


class ToolCallService:
    """Runs tool calls against a ``CSRService``."""

    def __init__(self, csr: CSRService) -> None:
        self.csr = csr
        self._handlers: Dict[str, Callable[[ToolArguments], Any]] = {
            "check_balance": lambda args: csr.check_balance(args.utility, args.identifier, args.value),
            "check_outages": lambda args: csr.check_outages(args.utility, args.zip_code),
            "check_meter": lambda args: csr.check_meter(args.utility, args.account_number),
            "analyze_meter": lambda args: csr.analyze_meter(args.utility, args.account_number),
            "analyze_bills": lambda args: csr.analyze_bills(args.utility, args.account_number),
            "create_ticket": self._create_ticket,
        }

    def _create_ticket(self, args: ToolArguments) -> Dict[str, Any]:
        data = TicketCreate(**args.model_dump(include=set(TicketCreate.model_fields)))
        return self.csr.create_ticket(data).model_dump(mode="json", exclude_none=True)

    def run(self, call: ToolCall) -> Any:
        """Execute a single tool call and return its payload."""
        name = normalize_tool_name(call.function.name)
        handler = self._handlers.get(name)
        if handler is None:
            raise InvalidInput(f"Unknown tool '{call.function.name}'")
        logger.debug("Running tool call %s (%s)", call.id, name)
        return handler(parse_arguments(call.function.arguments))

    def run_all(self, calls: List[ToolCall]) -> Tuple[ToolCallResponse, int]:
        """Run every call and return the wrapped results with an HTTP status.

        The status is 200 when at least one call succeeded, otherwise the
        status of the first failure.
        """
        if not calls:
            raise InvalidInput("No tool calls in message")
        results: List[ToolCallResult] = []
        first_failure = None
        succeeded = False
        for call in calls:
            try:
                payload = self.run(call)
            except ServiceError as exc:
                logger.info("Tool call %s failed: %s", call.id, exc.message)
                if first_failure is None:
                    first_failure = exc.status_code
                payload = exc.to_dict()
            else:
                succeeded = True
            results.append(ToolCallResult(toolCallId=call.id, result=payload))
        status_code = status.HTTP_200_OK if succeeded else first_failure
        return ToolCallResponse(results=results), status_code
