from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime


class NewsletterSubscribe(BaseModel):
    email: Optional[str] = None


class SubscriberResponse(BaseModel):
    id: int
    email: str
    subscribed_at: Optional[datetime] = None
    active: bool
    unsubscribe_token: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class SubscriberListResponse(BaseModel):
    count: int
    subscribers: List[SubscriberResponse]
