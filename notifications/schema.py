from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime
from .model import EmailStatus


class EmailLogResponse(BaseModel):
    id: int
    recipient: str
    subject: str
    email_type: str
    status: EmailStatus
    created_at: Optional[datetime] = None
    error_message: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class EmailLogSummary(BaseModel):
    sent: int = 0
    failed: int = 0


class EmailLogListResponse(BaseModel):
    count: int
    logs: List[EmailLogResponse]
    summary: EmailLogSummary
