"""
Contact service.
Business logic for a bot's contact list (agenda) on BLiP.

Every operation builds one LIME command, hands it to the BLiP client
and turns the response into either a result or a typed exception:

    Operation   Command
    ─────────   ─────────────────────────────
    list        get    /contacts
    get         get    /contacts/{identity}
    add         set    /contacts   (contact resource)
    update      merge  /contacts   (contact resource)
    delete      delete /contacts/{identity}

BLiP failures raise CollaboratorError; a success without the expected
resource raises UnexpectedResourceError. Nothing is retried.
"""

from typing import Any, List, Optional
from urllib.parse import quote

from pydantic import ValidationError as PydanticValidationError

from contacts_api.shared.adapters.blip_adapter import BlipClient
from contacts_api.shared.core.exceptions import (
    CollaboratorError,
    UnexpectedResourceError,
    ValidationError,
)
from contacts_api.shared.core.logging import get_logger
from contacts_api.shared.schemas.command import (
    COLLECTION_MEDIA_TYPE,
    Command,
    CommandMethod,
    DocumentCollection,
)
from contacts_api.shared.schemas.contact import CONTACT_MEDIA_TYPE, Contact

logger = get_logger(__name__)

CONTACTS_URI = "/contacts"


def contact_uri(identity: str) -> str:
    """URI of a single contact, e.g. ``/contacts/john@messenger.gw.msging.net``."""
    return f"{CONTACTS_URI}/{quote(identity, safe='@')}"


class ContactService:
    """Service for contact-related operations against BLiP."""

    def __init__(self, client: BlipClient):
        self.client = client

    async def list_contacts(self) -> List[Contact]:
        """
        Get all contacts from the bot's agenda.

        Returns:
            Contacts in the order BLiP returned them

        Raises:
            CollaboratorError: If BLiP refuses the command
            UnexpectedResourceError: If BLiP returns no contact collection
        """
        command = Command(method=CommandMethod.GET, uri=CONTACTS_URI)
        response = await self._process(command, "Failed to get contacts from bot's agenda")

        resource = self._expect_resource(
            response, COLLECTION_MEDIA_TYPE, "Could not get contacts from BLiP"
        )
        try:
            collection = DocumentCollection.model_validate(resource)
            return [Contact.model_validate(item) for item in collection.items]
        except PydanticValidationError as e:
            raise UnexpectedResourceError(
                "Could not get contacts from BLiP",
                details={"uri": command.uri, "error_count": e.error_count()},
            ) from e

    async def get_contact(self, identity: str) -> Contact:
        """
        Get a single contact by identity.

        Args:
            identity: Contact identity

        Returns:
            The contact stored on BLiP

        Raises:
            CollaboratorError: If BLiP refuses the command (e.g. unknown contact)
            UnexpectedResourceError: If BLiP returns no contact
        """
        command = Command(method=CommandMethod.GET, uri=contact_uri(identity))
        response = await self._process(
            command, f"Failed to get contact from bot's agenda using {identity}"
        )

        message = f"Could not get contact from BLiP using {identity}"
        resource = self._expect_resource(response, CONTACT_MEDIA_TYPE, message)
        try:
            return Contact.model_validate(resource)
        except PydanticValidationError as e:
            raise UnexpectedResourceError(
                message,
                details={"uri": command.uri, "error_count": e.error_count()},
            ) from e

    async def add_contact(self, contact: Contact) -> Command:
        """
        Add a contact to the bot's agenda.

        Returns:
            BLiP's acknowledgment command
        """
        command = Command(
            method=CommandMethod.SET,
            uri=CONTACTS_URI,
            type=CONTACT_MEDIA_TYPE,
            resource=contact.to_wire(),
        )
        return await self._process(
            command,
            f"Failed to add contact to the bot's agenda using {contact.identity}",
        )

    async def update_contact(self, identity: str, contact: Contact) -> Command:
        """
        Merge a contact's fields into the one stored on BLiP.

        The contact body must carry an identity equal to the one in the
        request path; otherwise nothing is sent to BLiP.

        Args:
            identity: Identity taken from the request path
            contact: Contact fields to merge

        Returns:
            BLiP's acknowledgment command

        Raises:
            ValidationError: If the body has no identity or it differs from ``identity``
            CollaboratorError: If BLiP refuses the command
        """
        if contact.identity is None:
            raise ValidationError(
                "Body must be a Contact json containing the contact's Identity",
                details={"field": "contact"},
            )
        if str(contact.identity) != identity:
            raise ValidationError(
                "Given identity does not match the contact's identity",
                details={
                    "field": "identity",
                    "path_identity": identity,
                    "body_identity": contact.identity,
                },
            )

        command = Command(
            method=CommandMethod.MERGE,
            uri=CONTACTS_URI,
            type=CONTACT_MEDIA_TYPE,
            resource=contact.to_wire(),
        )
        return await self._process(
            command,
            f"Failed to update contact on the bot's agenda using {identity}",
        )

    async def delete_contact(self, identity: str) -> Command:
        """
        Delete a contact from the bot's agenda.

        Returns:
            BLiP's acknowledgment command
        """
        command = Command(method=CommandMethod.DELETE, uri=contact_uri(identity))
        return await self._process(
            command,
            f"Failed to delete contact from bot's agenda using {identity}",
        )

    async def _process(self, command: Command, failure_message: str) -> Command:
        """Send a command and raise CollaboratorError unless BLiP reports success."""
        response = await self.client.process_command(command)

        logger.info(
            "BLiP command processed",
            command_id=command.id,
            method=command.method.value,
            uri=command.uri,
            status=response.status.value if response.status else None,
        )

        if not response.is_success:
            description = response.reason_description
            raise CollaboratorError(
                f"{failure_message}: {description or 'no reason given'}",
                reason_code=response.reason.code if response.reason else None,
                reason_description=description,
                details={"method": command.method.value, "uri": command.uri},
            )

        return response

    @staticmethod
    def _expect_resource(response: Command, media_type: str, message: str) -> Any:
        """Return the response resource, or raise if it is missing or of another type."""
        resource: Optional[Any] = response.resource
        if not isinstance(resource, dict):
            raise UnexpectedResourceError(message, details={"uri": response.uri})
        if response.type is not None and response.type != media_type:
            raise UnexpectedResourceError(
                message,
                details={"uri": response.uri, "expected_type": media_type, "type": response.type},
            )
        return resource
