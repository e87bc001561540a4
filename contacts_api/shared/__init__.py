"""
Shared Module

Code used by the API layer that is not HTTP-specific:
- Services: Contact operations against BLiP
- Schemas: Pydantic models for LIME documents and API responses
- Core: Logging, exceptions
- Adapters: External service integrations (BLiP)

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── adapters/       ← External services

Usage:
======
    from contacts_api.shared.services import ContactService
    from contacts_api.shared.schemas import Contact, Command
    from contacts_api.shared.core import logger, ContactsApiException
"""
