"""EmailJS REST client. One POST per message; no retries."""

import logging
from typing import Any, Dict, Optional

import httpx

from app.config import settings
from app.core.exceptions import ServerError, UpstreamServiceError

logger = logging.getLogger(__name__)


class EmailJSClient:
    def __init__(
        self,
        public_key: Optional[str] = None,
        private_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.public_key = public_key if public_key is not None else settings.emailjs_public_key
        self.private_key = private_key if private_key is not None else settings.emailjs_private_key
        self.api_url = api_url or settings.emailjs_api_url
        self.timeout = timeout or settings.fetch_timeout_seconds
        self._transport = transport

    async def send(self, service_id: Optional[str], template_id: Optional[str], params: Dict[str, Any]) -> None:
        """Render and send one template. Raises UpstreamServiceError when EmailJS rejects it."""
        if not service_id or not template_id or not self.public_key:
            raise ServerError("EmailJS is not configured", code="CONFIGURATION_ERROR")

        payload = {
            "service_id": service_id,
            "template_id": template_id,
            "user_id": self.public_key,
            "template_params": params,
        }
        if self.private_key:
            payload["accessToken"] = self.private_key

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.api_url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"EmailJS request failed: {e}")
            raise UpstreamServiceError("Email delivery failed", message=str(e))

        if resp.status_code >= 400:
            logger.error(f"EmailJS error: {resp.status_code} {resp.text}")
            raise UpstreamServiceError("Email delivery failed", message=resp.text or f"EmailJS error: {resp.status_code}")


def get_email_client() -> EmailJSClient:
    return EmailJSClient()
