"""Error Handlers — every failure leaves the API as one JSON envelope: {"error": {...}}.

Invariants:
    - CertStudyError → its own http_status and to_response() body
    - Request validation failures → 400 VALIDATION_ERROR with per-field details
    - Anything else → 500 INTERNAL_ERROR; exception text never reaches the client
    - Log records carry the path, the error code and the acting user (X-User-Id) when known

Design Decisions:
    - Handlers are plain module functions registered with add_exception_handler, so
      they can be unit-called without building an app
    - 4xx logged at WARNING, 5xx at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import CertStudyError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CertStudyError, handle_certstudy_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _log_extra(request: Request, code: str) -> dict:
    return {
        "path": request.url.path,
        "error_code": code,
        "user_id": request.headers.get("x-user-id"),
    }


async def handle_certstudy_error(request: Request, exc: CertStudyError) -> JSONResponse:
    extra = _log_extra(request, exc.code)
    extra["resource_type"] = exc.context.resource_type
    extra["resource_id"] = exc.context.resource_id
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    logger.log(level, exc.message, extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"Rejected request: {len(details)} invalid field(s)",
        extra=_log_extra(request, "VALIDATION_ERROR"),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled {type(exc).__name__}: {exc}",
        exc_info=exc,
        extra=_log_extra(request, "INTERNAL_ERROR"),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list | None = None,
) -> dict:
    body = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        body["details"] = details
    return {"error": body}
