"""
Page routes for the contact list, detail view and contact forms
"""
from typing import Optional
from urllib.parse import quote
from uuid import UUID

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from contact_app.core.config import get_settings
from contact_app.core.database import get_db
from contact_app.core.flash import FlashContext, get_flash
from contact_app.core.logging_config import LoggingConfig
from contact_app.core.templates import render_template
from contact_app.core.validation import (NAME_TAKEN, ValidationResult,
                                         contact_rules, validate)
from contact_app.services.contact_service import ContactService

logger = LoggingConfig.get_logger(__name__)

router = APIRouter(tags=["contacts_pages"])

MSG_ADDED = "Contact added successfully"
MSG_UPDATED = "Contact updated successfully"
MSG_DELETED = "Contact deleted successfully"
MSG_NOT_FOUND = "Contact not found"


def get_contact_service(db: Session = Depends(get_db)) -> ContactService:
    return ContactService(db)


def _parse_id(contact_id: Optional[str]) -> Optional[UUID]:
    try:
        return UUID(contact_id.strip()) if contact_id else None
    except ValueError:
        return None


def validate_contact_form(
    service: ContactService,
    name: str,
    email: str,
    nohp: str,
    contact_id: Optional[str] = None,
) -> ValidationResult:
    """
    Run the field rules, then the name uniqueness check.

    The uniqueness check needs a store lookup, so it only runs once the
    fields themselves are valid. When editing, the name may belong to the
    contact being edited (``contact_id``) but to no other contact.
    """
    result = validate(
        {"name": name, "email": email, "nohp": nohp},
        contact_rules(get_settings().phone_region),
    )
    if result.is_valid:
        existing = service.find_by_name(result.values["name"])
        if existing is not None and existing.id != _parse_id(contact_id):
            result.add_error("name", NAME_TAKEN)
    return result


def redirect_to(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/contact", response_class=HTMLResponse)
def contact_list(
    request: Request,
    service: ContactService = Depends(get_contact_service),
    flash: FlashContext = Depends(get_flash),
):
    """Contact list with the pending flash message"""
    contacts = service.find_all()
    pending = flash.take_flash()
    return render_template(
        "contact.html",
        {
            "title": "Contacts",
            "page": "Contact List",
            "contacts": contacts,
            "msg": pending.message if pending else None,
        },
        request,
    )


@router.get("/contact/add", response_class=HTMLResponse)
async def contact_add_form(request: Request):
    """Empty add contact form"""
    return render_template(
        "contact_add.html",
        {"title": "Add Contact", "page": "Add Contact Form", "errors": []},
        request,
    )


@router.post("/contact", response_class=HTMLResponse)
def contact_create(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    nohp: str = Form(""),
    service: ContactService = Depends(get_contact_service),
    flash: FlashContext = Depends(get_flash),
):
    """Create a contact, or show the add form again with its errors"""
    result = validate_contact_form(service, name, email, nohp)
    if not result.is_valid:
        logger.info(
            "Add contact form rejected",
            extra={"fields": sorted({error.field for error in result.errors})}
        )
        return render_template(
            "contact_add.html",
            {
                "title": "Add Contact",
                "page": "Add Contact Form",
                "errors": result.error_dicts(),
            },
            request,
        )

    service.insert(result.values)
    flash.flash(MSG_ADDED)
    return redirect_to("/contact")


@router.put("/contact")
def contact_update(
    contact_id: str = Form("", alias="_id"),
    old_name: str = Form("", alias="oldName"),
    name: str = Form(""),
    email: str = Form(""),
    nohp: str = Form(""),
    service: ContactService = Depends(get_contact_service),
    flash: FlashContext = Depends(get_flash),
):
    """Update a contact; errors go back to the edit form through the flash"""
    result = validate_contact_form(service, name, email, nohp, contact_id=contact_id)
    if not result.is_valid:
        logger.info(
            "Edit contact form rejected",
            extra={"fields": sorted({error.field for error in result.errors})}
        )
        flash.flash_errors(result.error_dicts())
        return redirect_to(f"/contact/edit/{quote(old_name.strip(), safe='')}")

    contact = service.update_by_id(contact_id, result.values)
    flash.flash(MSG_UPDATED if contact is not None else MSG_NOT_FOUND)
    return redirect_to("/contact")


@router.delete("/contact")
def contact_delete(
    name: str = Form(""),
    service: ContactService = Depends(get_contact_service),
    flash: FlashContext = Depends(get_flash),
):
    """Delete a contact by name"""
    deleted = service.delete_by_name(name)
    flash.flash(MSG_DELETED if deleted else MSG_NOT_FOUND)
    return redirect_to("/contact")


@router.get("/contact/edit/{name:path}", response_class=HTMLResponse)
def contact_edit_form(
    name: str,
    request: Request,
    service: ContactService = Depends(get_contact_service),
    flash: FlashContext = Depends(get_flash),
):
    """Edit form, showing errors left by a rejected edit"""
    contact = service.find_by_name(name)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    pending = flash.take_flash()
    return render_template(
        "contact_edit.html",
        {
            "title": "Edit Contact",
            "page": "Edit Contact Form",
            "contact": contact,
            "errors": pending.errors if pending else [],
            "msg": pending.message if pending else None,
        },
        request,
    )


@router.get("/contact/{name:path}", response_class=HTMLResponse)
def contact_detail(
    name: str,
    request: Request,
    service: ContactService = Depends(get_contact_service),
):
    """Contact detail page"""
    contact = service.find_by_name(name)
    if contact is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)

    return render_template(
        "detail.html",
        {
            "title": f"Detail {name}",
            "page": f"Contact Detail {name}",
            "contact": contact,
        },
        request,
    )
