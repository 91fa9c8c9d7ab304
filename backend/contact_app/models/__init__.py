"""
SQLAlchemy models
"""
from contact_app.core.database import Base
from contact_app.models.contact import Contact  # noqa: F401

__all__ = ["Base", "Contact"]
