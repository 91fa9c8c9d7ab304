"""
One-shot flash messages carried in the signed cookie session
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastapi import Request

FLASH_KEY = "_flash"


@dataclass
class FlashMessage:
    """A pending flash: either a plain message or a list of field errors"""
    message: Optional[str] = None
    errors: List[Dict[str, str]] = field(default_factory=list)

    def to_session(self) -> dict:
        return {"message": self.message, "errors": self.errors}

    @classmethod
    def from_session(cls, data: dict) -> "FlashMessage":
        return cls(message=data.get("message"), errors=list(data.get("errors") or []))


class FlashContext:
    """
    Per-request access to the flash slot of the session.

    A flash written while handling one request is read by the next page
    that calls ``take_flash()``; taking it clears it, so each flash is
    shown exactly once. Writing replaces any flash not yet taken.
    """

    def __init__(self, session: dict):
        self._session = session

    def flash(self, message: str):
        self._session[FLASH_KEY] = FlashMessage(message=message).to_session()

    def flash_errors(self, errors: List[Dict[str, str]]):
        self._session[FLASH_KEY] = FlashMessage(errors=list(errors)).to_session()

    def take_flash(self) -> Optional[FlashMessage]:
        data = self._session.pop(FLASH_KEY, None)
        return FlashMessage.from_session(data) if data else None


def get_flash(request: Request) -> FlashContext:
    """
    Dependency for the flash context of the current request
    """
    return FlashContext(request.session)
