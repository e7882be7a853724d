"""FastAPI application."""

import logging

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from signin.config import Settings
from signin.interface.api.cookies import clear_auth_cookies
from signin.interface.api.routes import auth, health, users
from signin.interface.error import APIError
from signin.util.di.container import create_container, setup_di
from signin.util.observability import (
    SERVICE_VERSION,
    instrument_fastapi,
    instrument_httpx,
)

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Render an APIError as ``{"error", "message"}``."""
    response = JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "message": exc.message},
    )
    if exc.clear_cookies:
        clear_auth_cookies(response, request.app.state.settings)
    return response


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies in the same shape as other errors."""
    logger.info(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "invalid_request", "message": "Missing or invalid credential"},
    )


def create_app(
    container: AsyncContainer | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container; the production container when omitted.
            A supplied container must carry the same ``settings``.
        settings: Settings for CORS, cookies and the container; loaded
            from the environment when omitted
    """
    settings = settings or Settings()

    # Logfire must be configured before instrumentation
    instrument_httpx()

    app_instance = FastAPI(
        title="Sign-in API",
        description="Google Sign-In with JWT session cookies",
        version=SERVICE_VERSION,
    )
    app_instance.state.settings = settings

    instrument_fastapi(app_instance)

    # Cookies carry the session, so credentials must be allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(APIError, api_error_handler)
    app_instance.add_exception_handler(RequestValidationError, validation_error_handler)

    setup_di(app_instance, container or create_container(settings))

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
