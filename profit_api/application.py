"""
Application factory shared by every deployment shape.

The router-mounted server (``main.py``) and each standalone serverless
function (``api/*.py``) build their FastAPI app here, so middleware and the
error response shape are identical everywhere.
"""

import time
import uuid
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from profit_api.core.config import settings
from profit_api.core.exceptions import (
    MethodNotAllowedException,
    ProfitApiException,
    status_code_for,
)
from profit_api.core.logger import logger

# Public messages for framework-raised HTTP errors
HTTP_ERROR_MESSAGES = {
    400: "Invalid request",
    404: "Not found",
}


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def add_request_id(request: Request, call_next):
    """Add unique request ID to all requests for tracing."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    logger.info(
        f"Request started",
        extra={
            "request_id": request_id,
            "method": request.method,
            "url": str(request.url),
            "client_ip": request.client.host if request.client else "unknown"
        }
    )

    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Request-ID"] = request_id
    response.headers["X-Process-Time"] = str(process_time)

    logger.info(
        f"Request completed",
        extra={
            "request_id": request_id,
            "status_code": response.status_code,
            "process_time": process_time
        }
    )

    return response


async def profit_api_exception_handler(request: Request, exc: ProfitApiException):
    """Render application exceptions as ``{"error": message}``."""
    status_code = status_code_for(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Request failed: {exc.message}",
        extra={
            "request_id": getattr(request.state, "request_id", "unknown"),
            "error_code": exc.error_code,
            "details": exc.details
        }
    )
    return error_response(status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Give routing errors (unknown path, wrong verb) the same error shape."""
    headers = getattr(exc, "headers", None)
    if exc.status_code == 405:
        wrong_method = MethodNotAllowedException(allowed=(headers or {}).get("Allow", ""))
        logger.warning(
            f"Method not allowed",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "method": request.method,
                "error_code": wrong_method.error_code
            }
        )
        return error_response(405, wrong_method.message, headers=headers)

    message = HTTP_ERROR_MESSAGES.get(exc.status_code)
    if message is None:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(exc.status_code, message, headers=headers)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(
        f"Request validation failed",
        extra={
            "request_id": getattr(request.state, "request_id", "unknown"),
            "errors": exc.errors()
        }
    )
    return error_response(400, "Invalid request")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error: {str(exc)}",
        extra={"request_id": getattr(request.state, "request_id", "unknown")},
        exc_info=exc
    )
    return error_response(500, "Server error")


def create_app(
    *routers: APIRouter,
    prefix: str = "",
    title: Optional[str] = None,
    lifespan=None
) -> FastAPI:
    """
    Build a FastAPI app with the shared middleware and exception handlers.

    Args:
        routers: Routers to include
        prefix: Path prefix applied to every router
        title: OpenAPI title, defaults to the configured app name
        lifespan: Optional lifespan context manager

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title or settings.app_name,
        version=settings.version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(add_request_id)

    app.add_exception_handler(ProfitApiException, profit_api_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    for router in routers:
        app.include_router(router, prefix=prefix)

    return app
