"""
Service Dependencies

FastAPI dependencies for service injection.

A ContactService is created per request around a BLiP client bound to
that request's Authorization key. The client factory is its own
dependency so tests can replace BLiP with a fake:

    app.dependency_overrides[get_blip_client_factory] = lambda: FakeFactory()

Usage:
======
    from contacts_api.api.dependencies.services import ContactServiceDep

    @router.get("")
    async def list_contacts(contact_service: ContactServiceDep):
        return await contact_service.list_contacts()
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from contacts_api.api.dependencies.auth import get_authorization
from contacts_api.shared.adapters.blip_adapter import BlipClientFactory
from contacts_api.shared.services.contact_service import ContactService


@lru_cache
def get_blip_client_factory() -> BlipClientFactory:
    """
    Dependency to get the BLiP client factory.

    The factory only holds configuration, so one instance is shared.
    """
    return BlipClientFactory()


async def get_contact_service(
    authorization: Annotated[str, Depends(get_authorization)],
    factory: Annotated[BlipClientFactory, Depends(get_blip_client_factory)],
) -> ContactService:
    """
    Dependency to get ContactService instance.

    Creates a new service per request, talking to BLiP with the caller's key.
    """
    return ContactService(factory.build(authorization))


ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]
