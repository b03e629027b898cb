# routers/notifications.py

from fastapi import APIRouter, HTTPException, Depends

from dependencies.auth import require_admin
from core.email_utils import send_notification_email
from core.logging_config import logger
from models.notification import NotificationRequest


router = APIRouter(
    prefix="/api/notifications",
    tags=["Notifications"]
)


@router.post("/send", summary="Send a notification email", dependencies=[Depends(require_admin)])
def send_notification(payload: NotificationRequest):
    """
    Email a member about a request decision (`membership_renewal_approved`,
    `foundation_class_completed`, `baptism_signup_declined`, ...).

    Unlike the workflow emails, delivery failure is reported (500).
    `delivered` is false when SMTP is not configured and the email was skipped.
    """
    recipient = payload.recipient
    if not payload.type or not recipient or not recipient.email:
        logger.warning(f"Notification rejected, missing fields: type={payload.type}")
        raise HTTPException(400, "Missing required fields")

    logger.info(f"Sending {payload.type} notification to {recipient.email}")

    try:
        delivered = send_notification_email(
            payload.type,
            recipient.model_dump(),
            payload.data,
        )
    except Exception as e:
        logger.error(f"Notification {payload.type} to {recipient.email} failed: {e}")
        raise HTTPException(500, f"Failed to send email notification: {e}")

    return {"message": "Notification sent successfully", "delivered": delivered}
