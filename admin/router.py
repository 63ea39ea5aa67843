from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
import logging
from config import CONTACT_LIST_LIMIT, EMAIL_LOG_LIMIT
from booking import crud as booking_crud
from booking.schema import BookingListResponse, BookingResponse
from contact import crud as contact_crud
from contact.schema import ContactListResponse, ContactResponse
from database import Database, StorageError, get_db
from newsletter import crud as newsletter_crud
from newsletter.schema import SubscriberListResponse, SubscriberResponse
from notifications.schema import EmailLogListResponse, EmailLogResponse, EmailLogSummary
from utils import success_response
from . import crud, schema

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin",
    tags=["admin"]
)


@router.get("/statistics")
def get_statistics(db: Database = Depends(get_db)):
    try:
        stats = crud.get_statistics(db)
    except StorageError as e:
        logger.error(f"Error fetching statistics: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch statistics")

    return success_response(
        schema.StatisticsResponse(**stats),
        "Statistics retrieved successfully",
    )


@router.get("/email-logs")
def get_email_logs(
    limit: int = Query(EMAIL_LOG_LIMIT, ge=0),
    status: Optional[str] = None,
    db: Database = Depends(get_db),
):
    try:
        rows = crud.list_email_logs(db, status=status, limit=limit)
        summary = crud.email_log_summary(db)
    except StorageError as e:
        logger.error(f"Error fetching email logs: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch email logs")

    logs = [EmailLogResponse.model_validate(row) for row in rows]
    return success_response(
        EmailLogListResponse(count=len(logs), logs=logs, summary=EmailLogSummary(**summary)),
        "Email logs retrieved successfully",
    )


@router.get("/contacts")
def get_contacts(limit: int = Query(CONTACT_LIST_LIMIT, ge=0), db: Database = Depends(get_db)):
    try:
        rows = contact_crud.list_contacts(db, limit=limit)
    except StorageError as e:
        logger.error(f"Error fetching contacts: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch contacts")

    contacts = [ContactResponse.model_validate(row) for row in rows]
    return success_response(
        ContactListResponse(count=len(contacts), contacts=contacts),
        "Contact messages retrieved successfully",
    )


@router.get("/subscribers")
def get_subscribers(limit: int = Query(CONTACT_LIST_LIMIT, ge=0), db: Database = Depends(get_db)):
    try:
        rows = newsletter_crud.list_subscribers(db, active_only=False, limit=limit)
    except StorageError as e:
        logger.error(f"Error fetching subscribers: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch subscribers")

    subscribers = [SubscriberResponse.model_validate(row) for row in rows]
    return success_response(
        SubscriberListResponse(count=len(subscribers), subscribers=subscribers),
        "Newsletter subscribers retrieved successfully",
    )


@router.get("/bookings")
def get_bookings(limit: int = Query(CONTACT_LIST_LIMIT, ge=0), db: Database = Depends(get_db)):
    try:
        rows = booking_crud.list_bookings(db, limit=limit)
    except StorageError as e:
        logger.error(f"Error fetching bookings: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch bookings")

    bookings = [BookingResponse.model_validate(row) for row in rows]
    return success_response(
        BookingListResponse(count=len(bookings), bookings=bookings),
        "Bookings retrieved successfully",
    )
