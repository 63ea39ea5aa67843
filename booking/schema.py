from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime
from .model import BookingStatus


class BookingCreate(BaseModel):
    contact_id: Optional[int] = None
    package_type: Optional[str] = None
    event_date: Optional[datetime] = None
    guest_count: Optional[int] = Field(None, ge=0)


class BookingStatusUpdate(BaseModel):
    status: Optional[str] = None


class BookingResponse(BaseModel):
    id: int
    contact_id: int
    package_type: str
    event_date: Optional[datetime] = None
    guest_count: Optional[int] = None
    price_quote: Optional[float] = None
    status: BookingStatus
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BookingListResponse(BaseModel):
    count: int
    bookings: List[BookingResponse]
