"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- LimeSchema: Base for documents exchanged with BLiP (camelCase on the wire)
- Standard Responses: ErrorResponse, HealthResponse

Usage:
======
    from contacts_api.shared.schemas.common import LimeSchema

    class Reason(LimeSchema):
        code: Optional[int] = None
        description: Optional[str] = None
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LimeSchema(BaseModel):
    """
    Base schema for LIME documents.

    BLiP speaks camelCase JSON (``phoneNumber``, ``itemType``) while the
    Python side uses snake_case attributes. Provides:
    - alias_generator: snake_case attribute ↔ camelCase JSON key
    - populate_by_name: Allow field population by name or alias
    - extra="allow": Keep fields BLiP sends that are not modelled here
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON-ready dict BLiP expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")
    details: Optional[dict[str, Any]] = Field(
        default=None,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "error": {
                "code": "AUTHENTICATION_ERROR",
                "message": "Missing or incomplete Authorization header",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "swaggertraining"
    version: str = "v1"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
