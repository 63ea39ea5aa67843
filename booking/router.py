from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
import logging
from config import CONTACT_LIST_LIMIT
from contact import crud as contact_crud
from database import Database, StorageError, get_db
from utils import success_response
from . import crud, schema
from .model import BookingStatus

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/booking",
    tags=["booking"]
)


@router.post("/create", status_code=status.HTTP_201_CREATED)
def create_booking(booking: schema.BookingCreate, db: Database = Depends(get_db)):
    try:
        contact = None
        if booking.contact_id is not None:
            contact = contact_crud.get_contact(db, booking.contact_id)
        if contact is None:
            raise HTTPException(status_code=404, detail="Contact not found")

        price_quote = crud.quote_price(booking.package_type)
        if price_quote is None:
            raise HTTPException(status_code=400, detail="Invalid package type")

        booking_id = crud.create_booking(db, booking, price_quote)
        created = crud.get_booking(db, booking_id)
    except StorageError as e:
        logger.error(f"Error creating booking: {e}")
        raise HTTPException(status_code=500, detail="Failed to create booking")

    return success_response(
        {"booking": schema.BookingResponse.model_validate(created)},
        "Booking created successfully",
        status.HTTP_201_CREATED,
    )


@router.get("/list")
def list_bookings(
    status_filter: Optional[str] = Query(None, alias="status"),
    limit: int = Query(CONTACT_LIST_LIMIT, ge=0),
    db: Database = Depends(get_db),
):
    try:
        rows = crud.list_bookings(db, status=status_filter, limit=limit)
    except StorageError as e:
        logger.error(f"Error fetching bookings: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch bookings")

    bookings = [schema.BookingResponse.model_validate(row) for row in rows]
    return success_response(
        schema.BookingListResponse(count=len(bookings), bookings=bookings),
        "Bookings retrieved successfully",
    )


@router.get("/{booking_id}")
def read_booking(booking_id: int, db: Database = Depends(get_db)):
    try:
        booking = crud.get_booking(db, booking_id)
    except StorageError as e:
        logger.error(f"Error fetching booking {booking_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch booking")

    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")

    return success_response(
        {"booking": schema.BookingResponse.model_validate(booking)},
        "Booking retrieved successfully",
    )


@router.put("/{booking_id}/status")
def update_booking_status(
    booking_id: int,
    update: schema.BookingStatusUpdate,
    db: Database = Depends(get_db),
):
    if update.status not in {s.value for s in BookingStatus}:
        raise HTTPException(status_code=400, detail="Invalid status")

    try:
        if crud.get_booking(db, booking_id) is None:
            raise HTTPException(status_code=404, detail="Booking not found")

        crud.update_booking_status(db, booking_id, update.status)
        booking = crud.get_booking(db, booking_id)
    except StorageError as e:
        logger.error(f"Error updating booking {booking_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update booking")

    return success_response(
        {"booking": schema.BookingResponse.model_validate(booking)},
        "Booking status updated",
    )
