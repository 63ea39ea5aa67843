from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey
from sqlalchemy.sql import func
from database import Base
import enum


class PackageType(str, enum.Enum):
    PROFESSIONAL = "professional"
    ELITE = "elite"


class BookingStatus(str, enum.Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    contact_id = Column(Integer, ForeignKey("contact_messages.id"), nullable=False)
    package_type = Column(String(20), nullable=False)
    event_date = Column(DateTime(timezone=True), nullable=True)
    guest_count = Column(Integer, nullable=True)
    price_quote = Column(Float, nullable=True)
    status = Column(String(20), nullable=False, default=BookingStatus.PENDING.value,
                    server_default=BookingStatus.PENDING.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
