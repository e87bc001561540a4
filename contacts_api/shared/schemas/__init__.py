"""
Pydantic Schemas
"""

from contacts_api.shared.schemas.command import (
    COLLECTION_MEDIA_TYPE,
    Command,
    CommandMethod,
    CommandStatus,
    DocumentCollection,
    Reason,
)
from contacts_api.shared.schemas.common import (
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    LimeSchema,
)
from contacts_api.shared.schemas.contact import CONTACT_MEDIA_TYPE, Contact, Gender

__all__ = [
    "COLLECTION_MEDIA_TYPE",
    "CONTACT_MEDIA_TYPE",
    "Command",
    "CommandMethod",
    "CommandStatus",
    "Contact",
    "DocumentCollection",
    "ErrorDetail",
    "ErrorResponse",
    "Gender",
    "HealthResponse",
    "LimeSchema",
    "Reason",
]
