from fastapi import APIRouter, Depends
from app.database.supabase_client import get_service_supabase
from app.modules.notifications.emailjs import EmailJSClient, get_email_client
from app.modules.notifications.schemas import (
    SendUpdatesRequest, SendUpdatesResponse, FeedbackRequest, FeedbackResponse
)
from app.modules.notifications.service import NotificationService
from supabase import Client

router = APIRouter(tags=["notifications"])


def get_notification_service(
    supabase: Client = Depends(get_service_supabase),
    email: EmailJSClient = Depends(get_email_client)
) -> NotificationService:
    return NotificationService(supabase, email)


@router.post("/send-updates", response_model=SendUpdatesResponse)
async def send_updates(
    body: SendUpdatesRequest,
    service: NotificationService = Depends(get_notification_service)
):
    """Broadcast an update email to users with notifications enabled"""
    return await service.send_updates(body.message)


@router.post("/feedback", response_model=FeedbackResponse)
async def send_feedback(
    body: FeedbackRequest,
    service: NotificationService = Depends(get_notification_service)
):
    return await service.send_feedback(body)
