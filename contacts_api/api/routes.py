"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health         → Health check endpoint
    /contacts       → Bot contact list (CRUD over BLiP)

Usage:
======
    from contacts_api.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from contacts_api.api.handlers import (
    contacts_handler,
    health_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    app.include_router(
        contacts_handler.router,
        prefix="/contacts",
        tags=["Contacts"],
    )
