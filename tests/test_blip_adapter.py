import json

import httpx
import pytest

from contacts_api.shared.adapters.blip_adapter import BlipClientFactory, BlipHttpClient
from contacts_api.shared.core.exceptions import ExternalServiceError
from contacts_api.shared.schemas.command import Command, CommandMethod, CommandStatus


COMMANDS_URL = "https://http.msging.net/commands"
AUTHORIZATION = "Key YmFneTpzMDVU"


def _client(handler) -> BlipHttpClient:
    return BlipHttpClient(
        authorization=AUTHORIZATION,
        commands_url=COMMANDS_URL,
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_posts_command_with_authorization_and_parses_response():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["authorization"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={
                "id": seen["body"]["id"],
                "from": "postmaster@crm.msging.net/#iris-hosted-1",
                "method": "get",
                "status": "success",
                "type": "application/vnd.lime.contact+json",
                "resource": {"identity": "alice@x"},
            },
        )

    command = Command(method=CommandMethod.GET, uri="/contacts/alice@x")
    response = await _client(handler).process_command(command)

    assert seen["url"] == COMMANDS_URL
    assert seen["authorization"] == AUTHORIZATION
    assert seen["body"] == {"id": command.id, "method": "get", "uri": "/contacts/alice@x"}
    assert response.status == CommandStatus.SUCCESS
    assert response.from_ == "postmaster@crm.msging.net/#iris-hosted-1"
    assert response.resource == {"identity": "alice@x"}


@pytest.mark.asyncio
async def test_failure_command_is_returned_not_raised():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "method": "delete",
                "status": "failure",
                "reason": {"code": 67, "description": "Resource not found"},
            },
        )

    response = await _client(handler).process_command(
        Command(method=CommandMethod.DELETE, uri="/contacts/alice@x")
    )

    assert not response.is_success
    assert response.reason_description == "Resource not found"


@pytest.mark.asyncio
async def test_http_error_status_raises_external_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, text="Unauthorized")

    with pytest.raises(ExternalServiceError) as exc_info:
        await _client(handler).process_command(Command(method=CommandMethod.GET, uri="/contacts"))

    assert exc_info.value.details["http_status"] == 401
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_connection_error_raises_external_service_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExternalServiceError):
        await _client(handler).process_command(Command(method=CommandMethod.GET, uri="/contacts"))


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"<html>maintenance</html>", b'{"status": "success"}'])
async def test_unreadable_response_raises_external_service_error(content):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=content)

    with pytest.raises(ExternalServiceError):
        await _client(handler).process_command(Command(method=CommandMethod.GET, uri="/contacts"))


def test_factory_binds_authorization_and_settings():
    factory = BlipClientFactory(commands_url=COMMANDS_URL, timeout_seconds=2.5)

    client = factory.build(AUTHORIZATION)

    assert isinstance(client, BlipHttpClient)
    assert client.authorization == AUTHORIZATION
    assert client.commands_url == COMMANDS_URL
    assert client.timeout_seconds == 2.5
