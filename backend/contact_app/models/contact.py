"""
Contact model
"""
from uuid import uuid4

from sqlalchemy import Column, DateTime, String, Uuid

from contact_app.core.database import Base


class Contact(Base):
    """
    A person in the address book.

    ``name`` doubles as the human-facing key in URLs. It is kept unique by
    checking before every write, not by a database constraint.
    ``last_modified`` stays NULL until the first edit.
    """
    __tablename__ = "contacts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    nohp = Column(String(32), nullable=False)
    last_modified = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Contact(id={self.id}, name='{self.name}')>"

