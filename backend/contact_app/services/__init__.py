"""
Services
"""
from contact_app.services.contact_service import ContactService  # noqa: F401
