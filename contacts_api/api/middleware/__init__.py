"""
API Middleware

Custom middleware for the FastAPI application.

Components:
===========
- error_handler: Global exception handling
- request_logging: Request/response logging

Usage:
======
    from contacts_api.api.middleware import setup_exception_handlers, RequestLoggingMiddleware

    app = FastAPI()
    setup_exception_handlers(app)
    app.add_middleware(RequestLoggingMiddleware)
"""

from contacts_api.api.middleware.error_handler import setup_exception_handlers
from contacts_api.api.middleware.request_logging import RequestLoggingMiddleware

__all__ = [
    "setup_exception_handlers",
    "RequestLoggingMiddleware",
]
