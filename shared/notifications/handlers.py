"""
Every failure leaves the API as one notification shape:

    {"title": "Error", "description": "<localized message>"}

Routers keep raising HTTPException with a localized ``detail``; the handlers
here only reshape the body. Anything else that escapes a route is logged
and answered with the generic message and a 500. Nothing is classified or retried.
"""
import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)

ERROR_TITLE = "Error"
SUCCESS_TITLE = "Berhasil"

GENERIC_ERROR = "Terjadi kesalahan yang tidak terduga"
INVALID_INPUT = "Data yang dikirim tidak valid"
TOO_MANY_REQUESTS = "Terlalu banyak permintaan. Silakan coba lagi nanti."


def notification(description: str, title: str = SUCCESS_TITLE) -> dict:
    return {"title": title, "description": description}


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    description = exc.detail if isinstance(exc.detail, str) else GENERIC_ERROR
    return JSONResponse(
        status_code=exc.status_code,
        content=notification(description, ERROR_TITLE),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = notification(INVALID_INPUT, ERROR_TITLE)
    body["errors"] = jsonable_encoder(exc.errors())
    return JSONResponse(status_code=422, content=body)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled_error", path=request.url.path, method=request.method, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content=notification(GENERIC_ERROR, ERROR_TITLE),
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
    logger.warning("rate_limited", path=request.url.path, limit=str(exc.detail))
    return JSONResponse(
        status_code=429,
        content=notification(TOO_MANY_REQUESTS, ERROR_TITLE),
    )


def register_notification_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
