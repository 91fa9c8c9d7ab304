"""
Contact Service: the contact store
"""
from typing import Dict, List, Optional, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contact_app.core.exceptions import ContactStoreError
from contact_app.core.logging_config import LoggingConfig
from contact_app.core.metrics import contact_operations_total
from contact_app.models.contact import Contact
from contact_app.utils.datetime_utils import utc_now

logger = LoggingConfig.get_logger(__name__)

CONTACT_FIELDS = ("name", "email", "nohp")


class ContactService:
    """Service for reading and writing contacts"""

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, error: Exception) -> ContactStoreError:
        self.db.rollback()
        contact_operations_total.labels(operation=operation, status="error").inc()
        logger.error(
            f"Contact store {operation} failed: {error}",
            exc_info=True,
            extra={"operation": operation, "error_type": type(error).__name__}
        )
        return ContactStoreError(operation)

    def find_all(self) -> List[Contact]:
        """
        Get every contact, ordered by name
        """
        try:
            return list(self.db.scalars(select(Contact).order_by(Contact.name)))
        except SQLAlchemyError as e:
            raise self._fail("find_all", e) from e

    def find_by_name(self, name: str) -> Optional[Contact]:
        """
        Get contact by name

        Args:
            name: Exact contact name

        Returns:
            Contact or None if no contact has that name
        """
        try:
            return self.db.scalars(
                select(Contact).where(Contact.name == name).limit(1)
            ).first()
        except SQLAlchemyError as e:
            raise self._fail("find_by_name", e) from e

    def find_by_id(self, contact_id: Union[UUID, str]) -> Optional[Contact]:
        """
        Get contact by ID

        Args:
            contact_id: Contact UUID, or its string form as posted by a form

        Returns:
            Contact or None if the ID is unknown or malformed
        """
        if not isinstance(contact_id, UUID):
            try:
                contact_id = UUID(str(contact_id))
            except ValueError:
                logger.debug(f"Malformed contact id: {contact_id!r}")
                return None
        try:
            return self.db.get(Contact, contact_id)
        except SQLAlchemyError as e:
            raise self._fail("find_by_id", e) from e

    def insert(self, fields: Dict[str, str]) -> Contact:
        """
        Create a new contact

        Args:
            fields: name, email and nohp

        Returns:
            Created contact with its new ID
        """
        contact = Contact(**{key: fields[key] for key in CONTACT_FIELDS})
        try:
            self.db.add(contact)
            self.db.commit()
            self.db.refresh(contact)
        except SQLAlchemyError as e:
            raise self._fail("insert", e) from e

        contact_operations_total.labels(operation="insert", status="success").inc()
        logger.info(f"Created contact: {contact.name}", extra={"contact_id": str(contact.id)})
        return contact

    def update_by_id(
        self,
        contact_id: Union[UUID, str],
        fields: Dict[str, str],
        touch_timestamp: bool = True
    ) -> Optional[Contact]:
        """
        Replace name, email and nohp of a contact

        Args:
            contact_id: Contact ID
            fields: New name, email and nohp
            touch_timestamp: Set last_modified to the current time

        Returns:
            Updated contact or None if no contact has that ID
        """
        contact = self.find_by_id(contact_id)
        if contact is None:
            contact_operations_total.labels(operation="update", status="not_found").inc()
            logger.info(f"Contact to update not found: {contact_id}")
            return None

        for key in CONTACT_FIELDS:
            setattr(contact, key, fields[key])
        if touch_timestamp:
            contact.last_modified = utc_now()

        try:
            self.db.commit()
            self.db.refresh(contact)
        except SQLAlchemyError as e:
            raise self._fail("update", e) from e

        contact_operations_total.labels(operation="update", status="success").inc()
        logger.info(f"Updated contact: {contact.name}", extra={"contact_id": str(contact.id)})
        return contact

    def delete_by_name(self, name: str) -> bool:
        """
        Delete the contact with the given name

        Returns:
            True if a contact was removed, False if none had that name
        """
        contact = self.find_by_name(name)
        if contact is None:
            contact_operations_total.labels(operation="delete", status="not_found").inc()
            logger.info(f"Contact to delete not found: {name}")
            return False

        try:
            self.db.delete(contact)
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e

        contact_operations_total.labels(operation="delete", status="success").inc()
        logger.info(f"Deleted contact: {name}")
        return True
