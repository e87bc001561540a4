"""Pytest fixtures: the app wired to a fake BLiP client."""

from typing import Any, Optional

import pytest
from fastapi.testclient import TestClient

from contacts_api.api.dependencies.services import get_blip_client_factory
from contacts_api.api.main import create_application
from contacts_api.shared.schemas.command import Command, CommandStatus, Reason


AUTHORIZATION = "Key YmFneTpzMDVUZGlvNmZLV2t5TDl6Njl4Wg="


class FakeBlipClient:
    """Records commands and answers them with a canned status/resource."""

    def __init__(self) -> None:
        self.commands: list[Command] = []
        self.status = CommandStatus.SUCCESS
        self.type: Optional[str] = None
        self.resource: Optional[Any] = None
        self.reason: Optional[Reason] = None
        self.error: Optional[Exception] = None

    def succeed(self, resource: Optional[Any] = None, media_type: Optional[str] = None) -> None:
        self.status = CommandStatus.SUCCESS
        self.resource = resource
        self.type = media_type

    def fail(self, code: int, description: str) -> None:
        self.status = CommandStatus.FAILURE
        self.reason = Reason(code=code, description=description)

    async def process_command(self, command: Command) -> Command:
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return Command(
            id=command.id,
            from_="postmaster@crm.msging.net/#iris-hosted-1",
            method=command.method,
            uri=command.uri,
            status=self.status,
            type=self.type,
            resource=self.resource,
            reason=self.reason,
        )


class FakeBlipClientFactory:
    def __init__(self, client: FakeBlipClient) -> None:
        self.client = client
        self.authorizations: list[str] = []

    def build(self, authorization: str) -> FakeBlipClient:
        self.authorizations.append(authorization)
        return self.client


@pytest.fixture
def blip():
    return FakeBlipClient()


@pytest.fixture
def blip_factory(blip):
    return FakeBlipClientFactory(blip)


@pytest.fixture
def app(blip_factory):
    application = create_application()
    application.dependency_overrides[get_blip_client_factory] = lambda: blip_factory
    return application


@pytest.fixture
def client(app):
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    return {"Authorization": AUTHORIZATION}
