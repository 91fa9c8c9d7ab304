"""
Main FastAPI application entry point
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from contact_app.api.routes import contacts_pages, health, metrics, pages
from contact_app.core.config import get_settings
from contact_app.core.database import init_db
from contact_app.core.exceptions import ContactStoreError
from contact_app.core.flash import FlashContext
from contact_app.core.logging_config import LoggingConfig
from contact_app.core.middleware import (LoggingContextMiddleware,
                                         MethodOverrideMiddleware)
from contact_app.core.middleware_metrics import MetricsMiddleware
from contact_app.core.templates import STATIC_DIR, render_template

# Configure logging first
LoggingConfig.configure()

logger = LoggingConfig.get_logger(__name__)

MSG_STORE_FAILURE = "Something went wrong, please try again"
NOT_FOUND_BODY = "<h1>404</h1>"


class PublicFiles(StaticFiles):
    """Static files mounted at the root; unknown paths of any method are 404"""

    async def get_response(self, path: str, scope):
        if scope["method"] not in ("GET", "HEAD"):
            raise StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return await super().get_response(path, scope)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI app"""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode...")
    init_db()

    yield

    logger.info(f"Shutting down {settings.app_name}...")


_settings = get_settings()
app = FastAPI(
    title=_settings.app_name,
    description="Contact management with server-rendered pages",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)

# Outermost last: logging sees every request, sessions wrap the routers
app.add_middleware(
    SessionMiddleware,
    secret_key=_settings.secret_key,
    session_cookie=_settings.session_cookie,
    max_age=_settings.session_max_age,
    same_site="lax",
    https_only=_settings.is_production,
)
app.add_middleware(MethodOverrideMiddleware)
app.add_middleware(MetricsMiddleware)
app.add_middleware(LoggingContextMiddleware)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Unknown routes and missing contacts get the bare 404 page"""
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return HTMLResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


@app.exception_handler(ContactStoreError)
async def handle_contact_store_error(request: Request, exc: ContactStoreError):
    """
    Store failures never crash or hang a request.

    Form submissions land back on the contact list with a failure flash;
    page reads render the error page.
    """
    logger.warning(
        "Contact store unavailable",
        extra={"operation": exc.operation, "path": request.url.path, "method": request.method}
    )
    if request.method in ("POST", "PUT", "DELETE", "PATCH"):
        FlashContext(request.session).flash(MSG_STORE_FAILURE)
        return RedirectResponse("/contact", status_code=status.HTTP_303_SEE_OTHER)

    return render_template(
        "error.html",
        {"title": "Error", "page": "Error", "message": MSG_STORE_FAILURE},
        request,
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler to log all unhandled errors"""
    logger.error(
        "Unhandled exception",
        exc_info=exc,
        extra={
            "error": str(exc),
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        }
    )
    return HTMLResponse(
        "<h1>500</h1><p>Internal Server Error</p>",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Include routers
app.include_router(pages.router)
app.include_router(contacts_pages.router)
app.include_router(health.router)
app.include_router(metrics.router)

# Public assets at the root path; mounted last so routes match first
app.mount("/", PublicFiles(directory=str(STATIC_DIR)), name="public")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "contact_app.main:app",
        host=_settings.api_host,
        port=_settings.api_port,
        reload=_settings.app_env == "development",
    )
