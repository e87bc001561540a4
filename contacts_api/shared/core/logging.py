"""
Logging Configuration

Structured logging setup using structlog for consistent, parseable logs.

Log Output:
===========
Development:
    2024-01-15 10:30:00 [info     ] BLiP command processed         method=get uri=/contacts status=success

Production (JSON):
    {"timestamp": "2024-01-15T10:30:00", "level": "info", "event": "BLiP command processed", "uri": "/contacts"}

Usage:
======
    from contacts_api.shared.core.logging import logger, get_logger, log_context

    # Basic logging
    logger.info("Contact created", identity=identity)

    # Get named logger
    blip_logger = get_logger("blip")
    blip_logger.debug("Sending command", uri=uri)

    # Add context to all subsequent logs
    log_context(request_id=request_id)
    logger.info("Processing request")  # Includes request_id
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

import structlog
from structlog.typing import Processor

from contacts_api.config.settings import settings


REDACTED_KEYS = frozenset({"authorization", "Authorization"})


def mask_authorization(authorization: Optional[str]) -> str:
    """
    Mask an Authorization header value for logging.

    Keeps the scheme and the last four characters of the token:
        "Key YmFneTpzMDVU" -> "Key ****MDVU"
    """
    if not authorization:
        return "<missing>"
    scheme, _, token = authorization.partition(" ")
    if not token:
        return "****"
    if len(token) <= 4:
        return f"{scheme} ****"
    return f"{scheme} ****{token[-4:]}"


def redact_authorization(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """structlog processor masking any ``authorization`` field before rendering."""
    for key in [k for k in REDACTED_KEYS if k in event_dict]:
        value = event_dict[key]
        event_dict[key] = mask_authorization(value if isinstance(value, str) else None)
    return event_dict


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Sets up structlog with:
    - LOG_FORMAT=console (default in development): colored console output
    - LOG_FORMAT=json (default elsewhere): JSON output for log aggregation
    - Authorization values masked in every event

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper()),
    )

    shared_processors: list[Processor] = [
        # request_id, method, path bound by RequestLoggingMiddleware
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        redact_authorization,
    ]

    if settings.log_renders_console:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to module name if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Add context variables to all subsequent log calls.

    Context is stored in context variables and automatically included
    in all log messages until cleared or the request ends.

    Args:
        **kwargs: Key-value pairs to add to log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all context variables.

    Call this at the end of request processing to prevent
    context from leaking to other requests.
    """
    structlog.contextvars.clear_contextvars()


# Initialize logging on module import
setup_logging()

# Default logger instance for convenient import
logger = get_logger("contacts_api")
