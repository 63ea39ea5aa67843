from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.sql import func, expression
from database import Base


class NewsletterSubscriber(Base):
    __tablename__ = "newsletter_subscribers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False)
    subscribed_at = Column(DateTime(timezone=True), server_default=func.now())
    active = Column(Boolean, nullable=False, default=True, server_default=expression.true())
    # Reserved; nothing generates or checks it yet
    unsubscribe_token = Column(String(100), unique=True, nullable=True)
