"""
FastAPI middleware for request context, logging and HTML form method override
"""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from contact_app.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

OVERRIDE_PARAM = "_method"
OVERRIDABLE_METHODS = {"PUT", "PATCH", "DELETE"}


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to add request context to logs"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Add request context and log request/response"""
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())

        LoggingConfig.set_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )

        start_time = time.time()
        logger.debug(
            "Request started",
            extra={"query_params": str(request.query_params)}
        )

        try:
            response = await call_next(request)

            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(
                "Request completed",
                extra={
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                }
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            duration_ms = int((time.time() - start_time) * 1000)
            logger.error(
                "Request failed",
                exc_info=True,
                extra={
                    "error": str(e),
                    "error_type": type(e).__name__,
                    "duration_ms": duration_ms,
                }
            )
            raise

        finally:
            LoggingConfig.clear_context()


class MethodOverrideMiddleware(BaseHTTPMiddleware):
    """
    Let HTML forms reach PUT/DELETE routes.

    Browsers only submit GET and POST, so a form posts to
    ``/contact?_method=PUT`` and the request is rewritten to PUT before
    routing. Only POST requests are rewritten.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.method == "POST":
            override = request.query_params.get(OVERRIDE_PARAM, "").upper()
            if override in OVERRIDABLE_METHODS:
                logger.debug(f"Overriding POST with {override}")
                request.scope["method"] = override
        return await call_next(request)
