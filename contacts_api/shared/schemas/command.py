"""
Command Schemas

LIME command envelope exchanged with BLiP's HTTP commands endpoint.

Request:
    {"id": "...", "method": "get", "uri": "/contacts"}

Successful response:
    {
        "id": "...",
        "method": "get",
        "status": "success",
        "type": "application/vnd.lime.collection+json",
        "resource": {"total": 2, "itemType": "...contact+json", "items": [...]}
    }

Failed response:
    {
        "id": "...",
        "method": "get",
        "status": "failure",
        "reason": {"code": 67, "description": "The requested resource was not found"}
    }
"""

from enum import Enum
from typing import Any, Optional
from uuid import uuid4

from pydantic import Field

from contacts_api.shared.schemas.common import LimeSchema


COLLECTION_MEDIA_TYPE = "application/vnd.lime.collection+json"


class CommandMethod(str, Enum):
    """Command methods understood by BLiP."""

    GET = "get"
    SET = "set"
    MERGE = "merge"
    DELETE = "delete"
    OBSERVE = "observe"
    SUBSCRIBE = "subscribe"


class CommandStatus(str, Enum):
    """Processing status reported in a command response."""

    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


class Reason(LimeSchema):
    """Why BLiP failed to process a command."""

    code: Optional[int] = None
    description: Optional[str] = None


class Command(LimeSchema):
    """A LIME command, either sent to BLiP or received back from it."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    method: CommandMethod
    uri: Optional[str] = None
    type: Optional[str] = None
    resource: Optional[Any] = None
    status: Optional[CommandStatus] = None
    reason: Optional[Reason] = None

    @property
    def is_success(self) -> bool:
        return self.status == CommandStatus.SUCCESS

    @property
    def reason_description(self) -> Optional[str]:
        return self.reason.description if self.reason else None


class DocumentCollection(LimeSchema):
    """A LIME collection document (``application/vnd.lime.collection+json``)."""

    total: Optional[int] = None
    item_type: Optional[str] = None
    items: list[Any] = Field(default_factory=list)
