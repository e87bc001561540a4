"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from contacts_api.shared.core.logging import logger, get_logger
    from contacts_api.shared.core.exceptions import ContactsApiException, ValidationError

    logger.info("Starting operation", uri=uri)
"""

from contacts_api.shared.core.logging import (
    logger,
    get_logger,
    log_context,
    clear_log_context,
    mask_authorization,
)
from contacts_api.shared.core.exceptions import (
    ContactsApiException,
    AuthenticationError,
    ValidationError,
    CollaboratorError,
    UnexpectedResourceError,
    ExternalServiceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    "log_context",
    "clear_log_context",
    "mask_authorization",
    # Exceptions
    "ContactsApiException",
    "AuthenticationError",
    "ValidationError",
    "CollaboratorError",
    "UnexpectedResourceError",
    "ExternalServiceError",
]
