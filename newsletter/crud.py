from typing import Any, Dict, List, Optional
from sqlalchemy import insert, select, update
from database import Database
from .model import NewsletterSubscriber

subscribers = NewsletterSubscriber.__table__


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def get_subscriber(db: Database, email: str) -> Optional[Dict[str, Any]]:
    return db.fetch_one(select(subscribers).where(subscribers.c.email == email))


def create_subscriber(db: Database, email: str) -> int:
    result = db.execute(insert(subscribers).values(email=email, active=True))
    return result.inserted_id


def set_active(db: Database, email: str, active: bool) -> int:
    """Flip the active flag; subscribed_at is left untouched"""
    result = db.execute(
        update(subscribers).where(subscribers.c.email == email).values(active=active)
    )
    return result.rows_affected


def list_subscribers(db: Database, active_only: bool = True, limit: Optional[int] = None) -> List[Dict[str, Any]]:
    query = select(subscribers)
    if active_only:
        query = query.where(subscribers.c.active.is_(True))
    query = query.order_by(subscribers.c.subscribed_at.desc(), subscribers.c.id.desc())
    if limit is not None:
        query = query.limit(limit)
    return db.fetch_many(query)
