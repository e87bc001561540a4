import pytest

from contacts_api.shared.core.exceptions import (
    CollaboratorError,
    UnexpectedResourceError,
    ValidationError,
)
from contacts_api.shared.schemas.command import COLLECTION_MEDIA_TYPE, CommandStatus
from contacts_api.shared.schemas.contact import CONTACT_MEDIA_TYPE, Contact, Gender
from contacts_api.shared.services.contact_service import ContactService, contact_uri


def test_contact_uri_keeps_the_address_readable():
    assert contact_uri("11121023102013021@messenger.gw.msging.net") == (
        "/contacts/11121023102013021@messenger.gw.msging.net"
    )
    assert contact_uri("john doe@0mn.io") == "/contacts/john%20doe@0mn.io"


@pytest.mark.asyncio
async def test_list_contacts_parses_collection_items(blip):
    blip.succeed(
        {
            "total": 1,
            "itemType": CONTACT_MEDIA_TYPE,
            "items": [{"identity": "alice@x", "gender": "female", "lastMessageDate": "2019-01-01"}],
        },
        COLLECTION_MEDIA_TYPE,
    )

    contacts = await ContactService(blip).list_contacts()

    assert len(contacts) == 1
    assert contacts[0].identity == "alice@x"
    assert contacts[0].gender == Gender.FEMALE
    assert contacts[0].last_message_date == "2019-01-01"


@pytest.mark.asyncio
async def test_list_contacts_rejects_resource_of_another_type(blip):
    blip.succeed({"identity": "alice@x"}, CONTACT_MEDIA_TYPE)

    with pytest.raises(UnexpectedResourceError):
        await ContactService(blip).list_contacts()


@pytest.mark.asyncio
async def test_list_contacts_rejects_malformed_items(blip):
    blip.succeed({"items": [{"identity": "alice@x", "gender": "robot"}]}, COLLECTION_MEDIA_TYPE)

    with pytest.raises(UnexpectedResourceError):
        await ContactService(blip).list_contacts()


@pytest.mark.asyncio
async def test_get_contact_keeps_unknown_fields(blip):
    blip.succeed({"identity": "alice@x", "customField": "kept"}, CONTACT_MEDIA_TYPE)

    contact = await ContactService(blip).get_contact("alice@x")

    assert contact.to_wire() == {"identity": "alice@x", "customField": "kept"}


@pytest.mark.asyncio
async def test_failure_carries_blip_reason(blip):
    blip.fail(61, "Unauthorized")

    with pytest.raises(CollaboratorError) as exc_info:
        await ContactService(blip).delete_contact("alice@x")

    assert exc_info.value.reason_code == 61
    assert exc_info.value.reason_description == "Unauthorized"
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == (
        "Failed to delete contact from bot's agenda using alice@x: Unauthorized"
    )


@pytest.mark.asyncio
async def test_failure_without_reason_still_raises(blip):
    blip.status = CommandStatus.FAILURE

    with pytest.raises(CollaboratorError) as exc_info:
        await ContactService(blip).add_contact(Contact(identity="alice@x"))

    assert exc_info.value.reason_code is None
    assert str(exc_info.value).endswith("using alice@x: no reason given")
    assert "None" not in str(exc_info.value)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "identity,contact",
    [
        ("alice@x", Contact(identity="bob@x")),
        ("alice@x", Contact(identity=None, name="Alice")),
        ("alice@x", Contact(identity="Alice@x")),
    ],
)
async def test_update_rejects_identity_mismatch_without_calling_blip(blip, identity, contact):
    with pytest.raises(ValidationError):
        await ContactService(blip).update_contact(identity, contact)

    assert blip.commands == []


@pytest.mark.asyncio
async def test_update_sends_snake_case_fields_as_camel_case(blip):
    contact = Contact(identity="alice@x", phone_number="+5531999999999", extras={"plan": "Gold"})

    await ContactService(blip).update_contact("alice@x", contact)

    assert blip.commands[0].resource == {
        "identity": "alice@x",
        "phoneNumber": "+5531999999999",
        "extras": {"plan": "Gold"},
    }


@pytest.mark.asyncio
async def test_each_command_gets_a_fresh_id(blip):
    service = ContactService(blip)

    await service.delete_contact("alice@x")
    await service.delete_contact("alice@x")

    assert blip.commands[0].id != blip.commands[1].id
