"""
Contacts API Application Entry Point

FastAPI application setup with routers, middleware, and lifecycle logging.

Application Architecture:
=========================
    Request
       │
       ▼
    CORS → Request logging → Exception handlers
       │
       ▼
    Routers: /health, /contacts
       │
       ▼
    ContactService (per request) → BlipHttpClient → BLiP commands endpoint

Documentation:
==============
The OpenAPI description is generated from the handler signatures,
pydantic schemas and docstrings. It is served at OPENAPI_URL
(``/swagger/v1/swagger.json``) and the interactive reference page at
DOCS_URL (``/``, the application root).

Serialization:
==============
LIME documents are pydantic models with camelCase aliases (see
``LimeSchema``); responses are written by alias with None fields left out.

Usage:
======
    # Run with uvicorn
    uvicorn contacts_api.api.main:app --host 0.0.0.0 --port 8000 --reload

    # Or programmatically
    from contacts_api.api.main import create_application
    app = create_application()
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contacts_api.config.settings import settings
from contacts_api.shared.core.logging import logger
from contacts_api.api.middleware import RequestLoggingMiddleware, setup_exception_handlers
from contacts_api.api.routes import register_routes


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    There is nothing to open or close: BLiP clients live for one request.
    """
    logger.info(
        "Starting Contacts API",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        blip_commands_url=settings.BLIP_COMMANDS_URL,
    )

    yield

    logger.info("Contacts API shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance

    This factory function:
    1. Creates the FastAPI app with settings and documentation endpoints
    2. Adds middleware (CORS, request logging)
    3. Sets up exception handlers
    4. Registers all routes
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Manage a BLiP bot's contact list through a documented REST API.",
        version=settings.APP_VERSION,
        openapi_url=settings.OPENAPI_URL if settings.DOCS_ENABLED else None,
        docs_url=settings.DOCS_URL if settings.DOCS_ENABLED else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # MIDDLEWARE
    # ═══════════════════════════════════════════════════════════════════════════

    app.add_middleware(RequestLoggingMiddleware)

    # Added last so it wraps everything else
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # EXCEPTION HANDLERS
    # ═══════════════════════════════════════════════════════════════════════════

    setup_exception_handlers(app)

    # ═══════════════════════════════════════════════════════════════════════════
    # ROUTES
    # ═══════════════════════════════════════════════════════════════════════════

    register_routes(app)

    return app


def run() -> None:
    """Serve the application with uvicorn using HOST/PORT from settings."""
    import uvicorn

    uvicorn.run(
        "contacts_api.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


# Create the application instance
app = create_application()
