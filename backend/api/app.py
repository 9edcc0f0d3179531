"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.config import Settings, get_settings
from shared.database import create_schema
from shared.exceptions import AccountsError, AuthenticationError
from modules.accounts.routes import router as accounts_router
from modules.auth.routes import router as auth_router
from modules.profiles.routes import router as profiles_router

from .dependencies import ServiceContainer
from .middleware.api_key import install_api_key_gate
from .routes import health

logger = logging.getLogger(__name__)

INVALID_PAYLOAD = "invalid request payload"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    container: ServiceContainer = app.state.container
    settings = container.settings
    if settings.auto_create_schema:
        create_schema(container.engine)
        logger.info("Database schema ensured")
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    container.engine.dispose()
    logger.info(f"Shutting down {settings.app_name}")


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as a flat {"error": "..."} body."""

    @app.exception_handler(AccountsError)
    async def accounts_error_handler(request: Request, exc: AccountsError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.debug(f"Rejected payload on {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": INVALID_PAYLOAD})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "internal server error"})


def create_app(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        engine: Pre-built engine (tests pass an in-memory SQLite engine)

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="User account and profile management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.container = ServiceContainer(settings, engine)

    # The key gate is added first so CORS wraps it and preflights pass
    install_api_key_gate(app, settings.api_key_header)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(accounts_router, tags=["accounts"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(profiles_router, tags=["profiles"])

    return app


# Application instance for uvicorn
app = create_app()
