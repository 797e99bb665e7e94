"""Contact API routes"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from ..models.contact import ContactMessage
from ..services.email import EmailClient, EmailDeliveryError
from .deps import get_email_client

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/contact", tags=["Contact"])


@router.post("", status_code=202)
async def send_contact_message(
    message: ContactMessage,
    client: EmailClient = Depends(get_email_client),
):
    """Send a contact form message"""
    try:
        await client.send(message)
    except EmailDeliveryError as e:
        logger.error(f"Error sending email: {e}")
        raise HTTPException(status_code=502, detail="Message could not be sent")

    return {"message": "Message Sent Successfully!"}
