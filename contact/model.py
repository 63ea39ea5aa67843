from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from database import Base
import enum


class ContactStatus(str, enum.Enum):
    NEW = "new"
    VIEWED = "viewed"
    RESPONDED = "responded"


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    event_name = Column(Text, nullable=False)
    package = Column(Text, nullable=True)
    details = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=ContactStatus.NEW.value,
                    server_default=ContactStatus.NEW.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    notes = Column(Text, nullable=True)
