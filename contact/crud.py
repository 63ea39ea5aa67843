from typing import Any, Dict, List, Optional
from sqlalchemy import insert, select, update
from database import Database
from utils import sanitize_input
from .model import ContactMessage
from . import schema

contacts = ContactMessage.__table__

# ---------- Contact message operations ---------- #

def create_contact(db: Database, form: schema.ContactSubmit) -> int:
    """Store a validated submission and return its id"""
    result = db.execute(
        insert(contacts).values(
            name=sanitize_input(form.name),
            email=form.email.lower(),
            event_name=sanitize_input(form.event_name),
            package=sanitize_input(form.package),
            details=sanitize_input(form.details),
        )
    )
    return result.inserted_id


def get_contact(db: Database, contact_id: int) -> Optional[Dict[str, Any]]:
    return db.fetch_one(select(contacts).where(contacts.c.id == contact_id))


def list_contacts(db: Database, status: Optional[str] = None, limit: int = 50) -> List[Dict[str, Any]]:
    """List contacts newest first, optionally filtered by status"""
    query = select(contacts)
    if status:
        query = query.where(contacts.c.status == status)
    query = query.order_by(contacts.c.created_at.desc(), contacts.c.id.desc()).limit(limit)
    return db.fetch_many(query)


def update_contact_status(db: Database, contact_id: int, status: str, notes: Optional[str] = None) -> int:
    values = {"status": status}
    # Notes are only written when the caller supplies some
    if notes:
        values["notes"] = sanitize_input(notes)
    result = db.execute(update(contacts).where(contacts.c.id == contact_id).values(**values))
    return result.rows_affected
