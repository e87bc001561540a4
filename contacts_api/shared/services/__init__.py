"""
Services Package

Business logic layer.
"""

from contacts_api.shared.services.contact_service import ContactService

__all__ = ["ContactService"]
