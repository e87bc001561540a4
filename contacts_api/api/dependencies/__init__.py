"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Authentication: get_authorization(), AuthorizationKey
- Services: get_blip_client_factory(), get_contact_service(), ContactServiceDep

Usage:
======
    from contacts_api.api.dependencies import ContactServiceDep

    @router.get("")
    async def list_contacts(contact_service: ContactServiceDep):
        return await contact_service.list_contacts()
"""

from contacts_api.api.dependencies.auth import (
    AUTHORIZATION_PREFIX,
    AuthorizationKey,
    check_authorization,
    get_authorization,
)
from contacts_api.api.dependencies.services import (
    ContactServiceDep,
    get_blip_client_factory,
    get_contact_service,
)

__all__ = [
    # Authentication
    "AUTHORIZATION_PREFIX",
    "AuthorizationKey",
    "check_authorization",
    "get_authorization",
    # Services
    "ContactServiceDep",
    "get_blip_client_factory",
    "get_contact_service",
]
