"""Error envelope and exception handlers.

Every failure leaves the API as {success: false, error, code, timestamp}.
Store errors are classified before they get here, so their raw text is
never part of the body.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import FestivalSearchException
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)

# error_code -> HTTP status; unknown codes are 500
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "STORE_TIMEOUT": 408,
    "SEARCH_FAILED": 500,
    "STORE_UNAVAILABLE": 503,
}


def error_envelope(message: str, **extra: Any) -> dict[str, Any]:
    """Body for every failed API response."""
    return {
        "success": False,
        "error": message,
        "timestamp": utc_now().isoformat(),
        **extra,
    }


def _domain_exception_handler(
    request: Request, exc: FestivalSearchException
) -> JSONResponse:
    """Return the error envelope with the status mapped from error_code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 500)
    headers = {"Retry-After": "5"} if status == 503 else None
    return JSONResponse(
        status_code=status,
        content=error_envelope(exc.message, code=exc.error_code, retryable=exc.retryable),
        headers=headers,
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """FastAPI parameter coercion failures (422)."""
    return JSONResponse(
        status_code=422,
        content=error_envelope(
            "Request validation failed", code="VALIDATION_ERROR", details=jsonable_encoder(exc.errors())
        ),
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes, disallowed methods and explicit HTTPExceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail), code="HTTP_ERROR"),
    )


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429 when a client exceeds the search rate limit."""
    return JSONResponse(
        status_code=429,
        content=error_envelope(f"Rate limit exceeded: {exc.detail}", code="RATE_LIMITED"),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort; the exception text is shown only in debug mode."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content=error_envelope(detail, code="INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above; RateLimitExceeded is matched before HTTPException."""
    app.add_exception_handler(FestivalSearchException, _domain_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
