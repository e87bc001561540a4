"""
Contact Schemas

The LIME contact document (``application/vnd.lime.contact+json``) as
stored in a bot's agenda on BLiP.

Only ``identity`` is meaningful to this API (it is the natural key for
lookups, updates and deletes). Every other field is passed through to
BLiP untouched.
"""

from enum import Enum
from typing import Optional

from pydantic import Field

from contacts_api.shared.schemas.common import LimeSchema


CONTACT_MEDIA_TYPE = "application/vnd.lime.contact+json"


class Gender(str, Enum):
    """Contact gender as understood by BLiP."""

    MALE = "male"
    FEMALE = "female"


class Contact(LimeSchema):
    """
    A contact on a bot's agenda.

    Example:
        {
            "identity": "11121023102013021@messenger.gw.msging.net",
            "name": "John Doe",
            "gender": "male",
            "group": "friends",
            "extras": {"plan": "Gold", "code": "1111"}
        }
    """

    identity: Optional[str] = Field(
        default=None,
        description="Contact address in the name@domain[/instance] form",
        examples=["11121023102013021@messenger.gw.msging.net"],
    )
    name: Optional[str] = Field(default=None, examples=["John Doe"])
    gender: Optional[Gender] = None
    group: Optional[str] = Field(default=None, examples=["friends"])
    extras: Optional[dict[str, str]] = Field(
        default=None,
        description="Free-form key/value pairs attached to the contact",
        examples=[{"plan": "Gold", "code": "1111"}],
    )

    address: Optional[str] = None
    city: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    cell_phone_number: Optional[str] = None
    photo_uri: Optional[str] = None
    timezone: Optional[int] = None
    culture: Optional[str] = None
    source: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[str] = None
    tax_document: Optional[str] = None
    is_pending: Optional[bool] = None
    share_personal_info: Optional[bool] = None
    share_phone_number: Optional[bool] = None
    last_message_date: Optional[str] = None
