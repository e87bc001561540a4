"""
Contacts Handler

Handles the bot's contact list (agenda) endpoints.

ARCHITECTURE:
=============
    Handler → ContactService → BlipClient → BLiP

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

The docstrings below are rendered as markdown in the interactive API
reference, so they are written for API consumers.
"""

from http import HTTPStatus
from typing import Annotated, Any, List, Optional

from fastapi import APIRouter, Body, Query, status
from pydantic import BeforeValidator

from contacts_api.api.dependencies import ContactServiceDep
from contacts_api.shared.core.logging import get_logger
from contacts_api.shared.schemas.command import Command
from contacts_api.shared.schemas.common import ErrorResponse
from contacts_api.shared.schemas.contact import Contact


logger = get_logger(__name__)

router = APIRouter()


UNAUTHORIZED_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_401_UNAUTHORIZED: {
        "model": ErrorResponse,
        "description": "Missing or incomplete `Authorization` header",
    },
}
BAD_REQUEST_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {
        "model": ErrorResponse,
        "description": "Mismatching `identity` and contact `identity` field",
    },
}
SERVER_ERROR_RESPONSE: dict[int | str, dict[str, Any]] = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ErrorResponse,
        "description": "BLiP failed the command or returned an unexpected answer. "
        "See the `error` object for details.",
    },
}

CONTACT_EXAMPLE = {
    "identity": "11121023102013021@messenger.gw.msging.net",
    "name": "John Doe",
    "gender": "male",
    "group": "friends",
    "extras": {"plan": "Gold", "code": "1111"},
}


def parse_http_status(value: Any) -> Any:
    """
    Accept an HTTP status by number or by name.

    Names ignore case and underscores, so "NotFound", "not_found" and
    "NOT_FOUND" all give 404.
    """
    if not isinstance(value, str):
        return value
    if value.isdigit():
        return int(value)
    wanted = value.replace("_", "").lower()
    for member in HTTPStatus:
        if member.name.replace("_", "").lower() == wanted:
            return member
    raise ValueError(f"Unknown HTTP status: {value}")


@router.get(
    "",
    response_model=List[Contact],
    response_model_exclude_none=True,
    summary="Gets all contacts from a bot's contact list",
    responses={**UNAUTHORIZED_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def get_all_contacts(
    contact_service: ContactServiceDep,
    sample_enum: Annotated[
        Optional[HTTPStatus],
        BeforeValidator(parse_http_status),
        Query(
            alias="sampleEnum",
            description="Sample enum to serve as an example. Takes a status code or its name",
        ),
    ] = None,
):
    """
    Returns every contact in the bot's agenda, in the order BLiP lists them.

    Sample request:

        GET /contacts HTTP/1.1
        Host: localhost:8000
        Authorization: Key YmFneTpzMDVUZGlvNmZLV2t5TDl6Njl4Wg=
    """
    if sample_enum is not None:
        logger.debug("Sample enum received", sample_enum=sample_enum.value)
    return await contact_service.list_contacts()


@router.get(
    "/{identity:path}",
    response_model=Contact,
    response_model_exclude_none=True,
    summary="Gets a given Contact from a bot's contact list",
    responses={**UNAUTHORIZED_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def get_contact(
    identity: str,
    contact_service: ContactServiceDep,
):
    """
    Returns the contact whose `identity` is given in the path.

    Sample request:

        GET /contacts/useridentity.chatbot@0mn.io HTTP/1.1
        Host: localhost:8000
        Authorization: Key YmFneTpzMDVUZGlvNmZLV2t5TDl6Njl4Wg=
    """
    return await contact_service.get_contact(identity)


@router.post(
    "",
    response_model=Command,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Adds a Contact to a bot's contact list",
    responses={**UNAUTHORIZED_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def create_contact(
    contact: Annotated[
        Contact,
        Body(description="The contact to add to the bot's agenda", examples=[CONTACT_EXAMPLE]),
    ],
    contact_service: ContactServiceDep,
):
    """
    Adds the contact to the bot's agenda and returns BLiP's acknowledgment.

    Sample request:

        POST /contacts HTTP/1.1
        Host: localhost:8000
        Authorization: Key YmFneTpzMDVUZGlvNmZLV2t5TDl6Njl4Wg=

        {
            "identity": "11121023102013021@messenger.gw.msging.net",
            "name": "John Doe",
            "gender": "male",
            "group": "friends",
            "extras": {
                "plan": "Gold",
                "code": "1111"
            }
        }
    """
    return await contact_service.add_contact(contact)


@router.put(
    "/{identity:path}",
    response_model=Command,
    response_model_exclude_none=True,
    summary="Updates a Contact on a bot's contact list",
    responses={**BAD_REQUEST_RESPONSE, **UNAUTHORIZED_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def update_contact(
    identity: str,
    contact: Annotated[
        Contact,
        Body(description="The contact to update on the bot's agenda", examples=[CONTACT_EXAMPLE]),
    ],
    contact_service: ContactServiceDep,
    query_sample: Annotated[
        Optional[str],
        Query(alias="querySample", description="Just a sample query param to show on the docs"),
    ] = None,
):
    """
    Merges the given fields into the stored contact.

    The body's `identity` must be present and equal to the `identity` in
    the path, otherwise the request is rejected with 400 and nothing is
    sent to BLiP.

    Sample request:

        PUT /contacts/11121023102013021@messenger.gw.msging.net HTTP/1.1
        Host: localhost:8000
        Authorization: Key YmFneTpzMDVUZGlvNmZLV2t5TDl6Njl4Wg=

        {
            "identity": "11121023102013021@messenger.gw.msging.net",
            "name": "John Doe",
            "gender": "male",
            "group": "friends",
            "extras": {
                "plan": "Gold",
                "code": "1111"
            }
        }
    """
    if query_sample is not None:
        logger.debug("Sample query received", query_sample=query_sample)
    return await contact_service.update_contact(identity, contact)


@router.delete(
    "/{identity:path}",
    response_model=Command,
    response_model_exclude_none=True,
    summary="Deletes a given Contact from a bot's contact list",
    responses={**UNAUTHORIZED_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def delete_contact(
    identity: str,
    contact_service: ContactServiceDep,
):
    """
    Removes the contact whose `identity` is given in the path.

    Sample request:

        DELETE /contacts/useridentity.chatbot@0mn.io HTTP/1.1
        Host: localhost:8000
        Authorization: Key YmFneTpzMDVUZGlvNmZLV2t5TDl6Njl4Wg=
    """
    return await contact_service.delete_contact(identity)
