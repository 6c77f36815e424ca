import asyncio
import logging
from postgrest.exceptions import APIError
from supabase import Client
from app.config import settings
from app.core.exceptions import ValidationError, database_error
from app.modules.notifications.emailjs import EmailJSClient
from app.modules.notifications.schemas import FeedbackRequest, SendUpdatesResponse, FeedbackResponse
from typing import Optional

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, supabase: Client, email: EmailJSClient):
        self.supabase = supabase
        self.email = email

    def _recipients(self) -> list:
        try:
            enabled = self.supabase.table("user_settings")\
                .select("user_id")\
                .eq("notifications_enabled", True)\
                .execute()
            if not enabled.data:
                return []
            user_ids = [row["user_id"] for row in enabled.data]
            profiles = self.supabase.table("profiles")\
                .select("email, full_name")\
                .in_("id", user_ids)\
                .execute()
        except APIError as e:
            raise database_error(e, "notification recipients")
        return [profile for profile in profiles.data or [] if profile.get("email")]

    async def send_updates(self, message: Optional[str]) -> SendUpdatesResponse:
        """Email an update to every user who enabled notifications. One failed send fails the batch."""
        if not message:
            raise ValidationError("Missing message")

        recipients = await asyncio.to_thread(self._recipients)
        if not recipients:
            return SendUpdatesResponse(sent=0)

        logger.info(f"Sending update to {len(recipients)} recipients")
        await asyncio.gather(*[
            self.email.send(
                settings.emailjs_service_id,
                settings.emailjs_updates_template_id,
                {
                    "to_email": profile["email"],
                    "to_name": profile.get("full_name") or profile["email"],
                    "message": message,
                },
            )
            for profile in recipients
        ])
        return SendUpdatesResponse(sent=len(recipients))

    async def send_feedback(self, feedback: FeedbackRequest) -> FeedbackResponse:
        if not feedback.message or not feedback.message.strip():
            raise ValidationError("Missing message", message="Please enter your feedback")

        await self.email.send(
            settings.emailjs_feedback_service_id or settings.emailjs_service_id,
            settings.emailjs_feedback_template_id,
            {
                "user_email": feedback.email or "",
                "message": feedback.message,
                "rating": str(feedback.rating) if feedback.rating else "N/A",
            },
        )
        logger.info("Feedback sent")
        return FeedbackResponse()
