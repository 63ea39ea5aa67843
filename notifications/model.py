from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from database import Base
import enum


class EmailStatus(str, enum.Enum):
    SENT = "sent"
    FAILED = "failed"


class EmailType(str, enum.Enum):
    CONTACT_REPLY = "contact_reply"
    NEWSLETTER_WELCOME = "newsletter_welcome"


# Append-only audit trail, one row per send attempt
class EmailLog(Base):
    __tablename__ = "email_logs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    recipient = Column(Text, nullable=False)
    subject = Column(Text, nullable=False)
    email_type = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default=EmailStatus.SENT.value,
                    server_default=EmailStatus.SENT.value)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    error_message = Column(Text, nullable=True)
