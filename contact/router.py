from fastapi import APIRouter, Depends, HTTPException, Query, status
from starlette.concurrency import run_in_threadpool
from typing import Optional
import logging
from config import CONTACT_LIST_LIMIT
from database import Database, StorageError, get_db
from notifications.mailer import Notifier, get_notifier
from utils import success_response, validate_contact_form
from . import crud, schema
from .model import ContactStatus

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/contact",
    tags=["contact"]
)


@router.post("/submit", status_code=status.HTTP_201_CREATED)
async def submit_contact_form(
    form: schema.ContactSubmit,
    db: Database = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    errors = validate_contact_form(form.model_dump())
    if errors:
        raise HTTPException(status_code=400, detail=errors)

    try:
        contact_id = await run_in_threadpool(crud.create_contact, db, form)
    except StorageError as e:
        logger.error(f"Error submitting contact form: {e}")
        raise HTTPException(status_code=500, detail="Failed to submit contact form")

    # The row is already stored; a failed reply only shows up in the email log
    await notifier.send_contact_reply(form.email, form.name, form.event_name)

    return success_response(
        {"id": contact_id},
        "Contact form submitted successfully",
        status.HTTP_201_CREATED,
    )


@router.get("/list")
def list_contacts(
    status_filter: Optional[str] = Query(None, alias="status"),
    limit: int = Query(CONTACT_LIST_LIMIT, ge=0),
    db: Database = Depends(get_db),
):
    try:
        rows = crud.list_contacts(db, status=status_filter, limit=limit)
    except StorageError as e:
        logger.error(f"Error fetching contacts: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch contacts")

    contacts = [schema.ContactResponse.model_validate(row) for row in rows]
    return success_response(
        schema.ContactListResponse(count=len(contacts), contacts=contacts),
        "Contacts retrieved successfully",
    )


@router.get("/{contact_id}")
def read_contact(contact_id: int, db: Database = Depends(get_db)):
    try:
        contact = crud.get_contact(db, contact_id)
    except StorageError as e:
        logger.error(f"Error fetching contact {contact_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch contact")

    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")

    return success_response(
        {"contact": schema.ContactResponse.model_validate(contact)},
        "Contact retrieved successfully",
    )


@router.put("/{contact_id}/status")
def update_contact_status(
    contact_id: int,
    update: schema.ContactStatusUpdate,
    db: Database = Depends(get_db),
):
    if update.status not in {s.value for s in ContactStatus}:
        raise HTTPException(status_code=400, detail="Invalid status")

    try:
        if crud.get_contact(db, contact_id) is None:
            raise HTTPException(status_code=404, detail="Contact not found")

        crud.update_contact_status(db, contact_id, update.status, update.notes)
        contact = crud.get_contact(db, contact_id)
    except StorageError as e:
        logger.error(f"Error updating contact {contact_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update contact")

    return success_response(
        {"contact": schema.ContactResponse.model_validate(contact)},
        "Contact status updated",
    )
