"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    ContactsApiException (base)
       │
       ├── AuthenticationError (401)      ← Missing or malformed Authorization header
       ├── ValidationError (400)          ← Contact payload does not match the request
       ├── CollaboratorError (500)        ← BLiP answered the command with a failure
       ├── UnexpectedResourceError (500)  ← BLiP succeeded but returned no usable resource
       └── ExternalServiceError (500)     ← BLiP could not be reached or answered garbage

Usage:
======
    from contacts_api.shared.core.exceptions import ValidationError

    raise ValidationError(
        "Given identity does not match the contact's identity",
        details={"field": "identity"},
    )

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "COLLABORATOR_ERROR",
            "message": "Failed to get contacts from bot's agenda: Unauthorized",
            "details": {"reason_code": 61, "reason_description": "Unauthorized"}
        }
    }
"""

from typing import Any, Optional


class ContactsApiException(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# CLIENT ERRORS (400, 401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(ContactsApiException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when the Authorization header is missing or does not use
    the ``Key`` scheme. The token itself is validated by BLiP.
    """

    def __init__(
        self,
        message: str = "Missing or incomplete Authorization header",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


class ValidationError(ContactsApiException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# COLLABORATOR ERRORS (500)
# ═══════════════════════════════════════════════════════════════════════════════


class CollaboratorError(ContactsApiException):
    """
    BLiP reported a failure status for a command (500).

    The reason sent by BLiP is kept in ``details`` so callers can see
    why the platform refused the command.
    """

    def __init__(
        self,
        message: str,
        reason_code: Optional[int] = None,
        reason_description: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        extra_details = dict(details or {})
        extra_details["reason_code"] = reason_code
        extra_details["reason_description"] = reason_description
        self.reason_code = reason_code
        self.reason_description = reason_description
        super().__init__(
            message=message,
            status_code=500,
            error_code="COLLABORATOR_ERROR",
            details=extra_details,
        )


class UnexpectedResourceError(ContactsApiException):
    """BLiP reported success without the resource the operation needs (500)."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="UNEXPECTED_RESOURCE",
            details=details,
        )


class ExternalServiceError(ContactsApiException):
    """
    External service error (500).

    Raised when the command could not be delivered or the answer
    could not be read (network error, non-2xx HTTP status, invalid JSON).
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = dict(details or {})
        extra_details["service"] = service_name
        super().__init__(
            message=msg,
            status_code=500,
            error_code="EXTERNAL_SERVICE_ERROR",
            details=extra_details,
        )
