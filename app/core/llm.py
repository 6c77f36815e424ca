"""Groq chat-completions client and helpers for reading JSON out of model replies."""

import json
import logging
import re
from typing import Any, Optional

import httpx

from app.config import settings
from app.core.exceptions import ServerError, UpstreamServiceError

logger = logging.getLogger(__name__)

JSON_SYSTEM_PROMPT = "You are LinkMage. Always respond with valid JSON only. No extra text or formatting."

_FENCE_RE = re.compile(r"```(?:json)?\s*")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")


class GroqClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.groq_api_key
        self.model = model or settings.groq_model
        self.api_url = api_url or settings.groq_api_url
        self.timeout = timeout or settings.groq_timeout_seconds
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def complete(
        self,
        prompt: str,
        system: str = JSON_SYSTEM_PROMPT,
        max_tokens: int = 512,
        temperature: float = 0.3,
    ) -> str:
        """Send one system+user exchange and return the first choice's text ('' when absent)."""
        if not self.configured:
            logger.error("GROQ_API_KEY is missing from environment variables.")
            raise ServerError(
                "GROQ_API_KEY is missing from server environment.",
                code="CONFIGURATION_ERROR",
            )

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.api_url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Groq request failed: {e}")
            raise UpstreamServiceError("AI request failed", message=str(e))

        if resp.status_code >= 400:
            logger.error(f"Groq API error: {resp.status_code} {resp.reason_phrase}")
            raise UpstreamServiceError("AI request failed", message=f"Groq API error: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"Groq returned a non-JSON body: {e}")
            raise UpstreamServiceError("AI request failed", message="Groq API returned an invalid response")
        if not isinstance(data, dict):
            raise UpstreamServiceError("AI request failed", message="Groq API returned an invalid response")
        choices = data.get("choices") or []
        if not choices:
            return ""
        content = (choices[0].get("message") or {}).get("content") or ""
        return content.strip()


def clean_json_text(text: str, expect: str = "object") -> str:
    """Drop Markdown fences and keep the outermost JSON object/array span."""
    cleaned = _FENCE_RE.sub("", (text or "").strip()).replace("```", "")
    match = (_ARRAY_RE if expect == "array" else _OBJECT_RE).search(cleaned)
    return match.group(0) if match else cleaned


def parse_json_response(text: str, expect: str = "object") -> Optional[Any]:
    """Parse a model reply as JSON. Returns None when it isn't the expected shape."""
    if not text:
        return None
    try:
        data = json.loads(clean_json_text(text, expect))
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse AI response: {e}")
        return None
    if expect == "array" and not isinstance(data, list):
        return None
    if expect == "object" and not isinstance(data, dict):
        return None
    return data


def get_llm_client() -> GroqClient:
    return GroqClient()
