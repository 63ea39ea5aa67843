from fastapi import APIRouter, Depends, HTTPException, Query, status
from starlette.concurrency import run_in_threadpool
import logging
from database import ConstraintViolation, Database, StorageError, get_db
from notifications.mailer import Notifier, get_notifier
from utils import is_valid_email, success_response
from . import crud, schema

# Configure logging
logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/newsletter",
    tags=["newsletter"]
)


@router.post("/subscribe", status_code=status.HTTP_201_CREATED)
async def subscribe(
    subscription: schema.NewsletterSubscribe,
    db: Database = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    email = crud.normalize_email(subscription.email)
    if not email or not is_valid_email(email):
        raise HTTPException(status_code=400, detail="Valid email required")

    try:
        existing = await run_in_threadpool(crud.get_subscriber, db, email)

        if existing and existing["active"]:
            raise HTTPException(status_code=409, detail="Already subscribed")

        # Reactivate without a new row or another welcome email
        if existing:
            await run_in_threadpool(crud.set_active, db, email, True)
            return success_response({"id": existing["id"]}, "Resubscribed successfully")

        subscriber_id = await run_in_threadpool(crud.create_subscriber, db, email)
    except ConstraintViolation:
        # A concurrent request inserted the same address first
        logger.warning(f"Duplicate subscription for {email} rejected by the store")
        raise HTTPException(status_code=409, detail="Already subscribed")
    except StorageError as e:
        logger.error(f"Error subscribing to newsletter: {e}")
        raise HTTPException(status_code=500, detail="Failed to subscribe")

    await notifier.send_newsletter_welcome(email)

    return success_response(
        {"id": subscriber_id},
        "Subscribed successfully",
        status.HTTP_201_CREATED,
    )


@router.get("/subscribers")
def list_subscribers(
    active: str = Query("true"),
    db: Database = Depends(get_db),
):
    active_only = active.lower() == "true"
    try:
        rows = crud.list_subscribers(db, active_only=active_only)
    except StorageError as e:
        logger.error(f"Error fetching subscribers: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch subscribers")

    subscribers = [schema.SubscriberResponse.model_validate(row) for row in rows]
    return success_response(
        schema.SubscriberListResponse(count=len(subscribers), subscribers=subscribers),
        "Subscribers retrieved successfully",
    )


@router.post("/unsubscribe/{email}")
def unsubscribe(email: str, db: Database = Depends(get_db)):
    normalized_email = crud.normalize_email(email)
    try:
        if crud.get_subscriber(db, normalized_email) is None:
            raise HTTPException(status_code=404, detail="Subscriber not found")

        crud.set_active(db, normalized_email, False)
    except StorageError as e:
        logger.error(f"Error unsubscribing {normalized_email}: {e}")
        raise HTTPException(status_code=500, detail="Failed to unsubscribe")

    return success_response({}, "Unsubscribed successfully")
