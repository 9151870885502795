"""FastAPI exception handlers producing ``{"error": message}`` bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from auditdash.errors.exceptions import AuditDashError, NotFoundError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(AuditDashError)
    async def auditdash_error_handler(request: Request, exc: AuditDashError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        if isinstance(exc, NotFoundError):
            logger.info(
                "resource_not_found",
                extra={
                    "path": request.url.path,
                    "trace_id": trace_id,
                    "resource": exc.resource,
                    "resource_id": exc.resource_id,
                },
            )
        elif exc.status_code >= 500:
            logger.error(
                "request_failed",
                extra={"path": request.url.path, "trace_id": trace_id, "code": exc.code, "reason": exc.message},
            )
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        if errors:
            first = errors[0]
            location = ".".join(str(part) for part in first.get("loc", ()))
            message = f"Invalid parameter {location}: {first.get('msg', 'invalid value')}"
        else:
            message = "Invalid request"
        return error_response(400, message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        trace_id = getattr(request.state, "trace_id", "unknown")
        logger.exception("unhandled_error", extra={"path": request.url.path, "trace_id": trace_id})
        return error_response(500, str(exc))
