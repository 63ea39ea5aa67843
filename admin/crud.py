from typing import Any, Dict, List, Optional
from sqlalchemy import func, select
from database import Database
from booking.model import Booking, BookingStatus
from contact.model import ContactMessage, ContactStatus
from newsletter.model import NewsletterSubscriber
from notifications.model import EmailLog, EmailStatus

contacts = ContactMessage.__table__
subscribers = NewsletterSubscriber.__table__
bookings = Booking.__table__
email_logs = EmailLog.__table__


def _count(db: Database, table, *criteria) -> int:
    query = select(func.count()).select_from(table)
    if criteria:
        query = query.where(*criteria)
    return db.scalar(query) or 0


def get_statistics(db: Database) -> Dict[str, Any]:
    """Dashboard counts plus revenue from confirmed bookings"""
    confirmed = bookings.c.status == BookingStatus.CONFIRMED.value
    revenue = db.scalar(select(func.sum(bookings.c.price_quote)).where(confirmed))

    return {
        "total_contacts": _count(db, contacts),
        "new_contacts": _count(db, contacts, contacts.c.status == ContactStatus.NEW.value),
        "total_subscribers": _count(db, subscribers, subscribers.c.active.is_(True)),
        "total_bookings": _count(db, bookings),
        "confirmed_bookings": _count(db, bookings, confirmed),
        "total_revenue": revenue or 0,
    }


def list_email_logs(db: Database, status: Optional[str] = None, limit: int = 100) -> List[Dict[str, Any]]:
    query = select(email_logs)
    if status:
        query = query.where(email_logs.c.status == status)
    query = query.order_by(email_logs.c.created_at.desc(), email_logs.c.id.desc()).limit(limit)
    return db.fetch_many(query)


def email_log_summary(db: Database) -> Dict[str, int]:
    return {
        "sent": _count(db, email_logs, email_logs.c.status == EmailStatus.SENT.value),
        "failed": _count(db, email_logs, email_logs.c.status == EmailStatus.FAILED.value),
    }
