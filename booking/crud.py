from typing import Any, Dict, List, NamedTuple, Optional
from sqlalchemy import insert, select, update
from database import Database
from .model import Booking, BookingStatus, PackageType
from . import schema

bookings = Booking.__table__


class PriceRange(NamedTuple):
    min: float
    max: float


# Quotes start at the minimum; the maximum is not used for quoting yet
PACKAGE_PRICING = {
    PackageType.PROFESSIONAL.value: PriceRange(min=6000, max=10000),
    PackageType.ELITE.value: PriceRange(min=7000, max=50000),
}


def quote_price(package_type: str) -> Optional[float]:
    """Base quote for a package, or None if the package is unknown"""
    pricing = PACKAGE_PRICING.get(package_type)
    return pricing.min if pricing else None


def create_booking(db: Database, booking: schema.BookingCreate, price_quote: float) -> int:
    result = db.execute(
        insert(bookings).values(
            contact_id=booking.contact_id,
            package_type=booking.package_type,
            event_date=booking.event_date,
            guest_count=booking.guest_count,
            price_quote=price_quote,
            status=BookingStatus.PENDING.value,
        )
    )
    return result.inserted_id


def get_booking(db: Database, booking_id: int) -> Optional[Dict[str, Any]]:
    return db.fetch_one(select(bookings).where(bookings.c.id == booking_id))


def list_bookings(db: Database, status: Optional[str] = None, limit: int = 50) -> List[Dict[str, Any]]:
    query = select(bookings)
    if status:
        query = query.where(bookings.c.status == status)
    query = query.order_by(bookings.c.created_at.desc(), bookings.c.id.desc()).limit(limit)
    return db.fetch_many(query)


def update_booking_status(db: Database, booking_id: int, status: str) -> int:
    # price_quote is fixed at creation and never recomputed here
    result = db.execute(update(bookings).where(bookings.c.id == booking_id).values(status=status))
    return result.rows_affected
