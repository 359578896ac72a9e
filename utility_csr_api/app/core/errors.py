"""
Service error taxonomy and its HTTP mapping.

Services raise ``InvalidInput`` when the caller sent something
unusable (missing parameter, unknown utility, malformed tool call) and
``NotFound`` when a lookup legitimately matched nothing.  Both carry
the HTTP status they map to.  ``register_exception_handlers`` installs
handlers on the FastAPI app that turn them into ``{"error": ...}``
bodies; anything else escaping a route is logged and answered with a
generic 500.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for expected service failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, extra: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        # Additional fields merged into the error body.
        self.extra = dict(extra or {})

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        body.update(self.extra)
        return body


class InvalidInput(ServiceError):
    """A required parameter is missing or a tenant code is unknown."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ServiceError):
    """No customer or record matched the given key."""

    status_code = status.HTTP_404_NOT_FOUND


def require_params(**params: Any) -> None:
    """Raise ``InvalidInput`` unless every keyword argument has a value.

    The error message lists all required names (in call order), not
    only the missing ones, so callers always see the full contract.
    """
    if not all(params.values()):
        raise InvalidInput(f"Missing required parameters: {', '.join(params)}")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach handlers mapping service errors to JSON responses."""

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        if isinstance(exc, NotFound):
            logger.info("%s %s -> %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = []
        for error in exc.errors():
            loc = [str(part) for part in error.get("loc", ()) if part not in ("query", "body")]
            if loc and loc[0] not in fields:
                fields.append(loc[0])
        message = "Invalid request"
        if fields:
            message = f"Missing required parameters: {', '.join(fields)}"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message, "details": jsonable_errors(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Return validation errors reduced to JSON‑safe fields."""
    return [
        {"loc": [str(part) for part in error.get("loc", ())], "msg": error.get("msg", "")}
        for error in exc.errors()
    ]
