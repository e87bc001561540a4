"""
Contacts API

A documented REST API over a BLiP bot's contact list.

Package Structure:
==================
    contacts_api/
    ├── api/        ← FastAPI application
    ├── shared/     ← Services, schemas, adapters, core
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn contacts_api.api.main:app --reload

    # or
    python -m contacts_api
"""
