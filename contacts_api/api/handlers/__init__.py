"""
API Handlers

Route handlers for the Contacts API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All BLiP interaction is delegated to the service layer.
"""

from contacts_api.api.handlers import (
    contacts_handler,
    health_handler,
)

__all__ = [
    "contacts_handler",
    "health_handler",
]
