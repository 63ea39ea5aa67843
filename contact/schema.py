from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime
from .model import ContactStatus


# Submission body; field rules are checked by validate_contact_form so all
# violations can be reported together
class ContactSubmit(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    event_name: Optional[str] = None
    package: Optional[str] = None
    details: Optional[str] = None


class ContactStatusUpdate(BaseModel):
    status: Optional[str] = None
    notes: Optional[str] = None


class ContactResponse(BaseModel):
    id: int
    name: str
    email: str
    event_name: str
    package: Optional[str] = None
    details: str
    status: ContactStatus
    created_at: Optional[datetime] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ContactListResponse(BaseModel):
    count: int
    contacts: List[ContactResponse]
