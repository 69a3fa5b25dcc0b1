"""
Middleware configuration for the application.
Includes Correlation ID setup, request logging and CORS.
"""

import time
import structlog
from typing import Callable
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from asgi_correlation_id import CorrelationIdMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log requests and responses with timing."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()

        logger.info(
            "Request started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        try:
            response = await call_next(request)
        except Exception:
            process_time = time.time() - start_time
            logger.exception(
                "Request failed",
                method=request.method,
                path=request.url.path,
                process_time_ms=round(process_time * 1000, 2),
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2),
        )
        return response


def setup_middleware(app: FastAPI) -> None:
    """Setup all middleware for the application.

    Starlette runs middleware last-added-first, so CORS is added last to sit
    outermost, and the correlation id is added after request logging so the id
    is already bound when the request is logged.
    """
    app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        update_request_header=True,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
