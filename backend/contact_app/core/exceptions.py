"""
Application exceptions
"""
from typing import Optional


class ContactAppException(Exception):
    """Base exception for the contact application"""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ContactStoreError(ContactAppException):
    """
    The contact store could not complete an operation.

    Raised by ContactService for any database failure (lost connection,
    locked database, constraint violation). Route handlers let it propagate;
    the application handler turns it into a failure flash or error page.
    """

    def __init__(self, operation: str, message: str = "Contact store operation failed"):
        self.operation = operation
        super().__init__(message, {"operation": operation})
