"""Single-shot page download with browser-like headers. No retries."""

import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

BROWSER_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Upgrade-Insecure-Requests": "1",
}


class FetchError(Exception):
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def is_valid_url(url) -> bool:
    """True for absolute http(s) URLs with a host"""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        parsed = urlparse(url.strip())
        # port and hostname are only parsed lazily
        parsed.port
        host = parsed.hostname
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(host)


def hostname(url: str) -> str:
    return urlparse(url).hostname or ""


class PageFetcher:
    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout or settings.fetch_timeout_seconds
        self.user_agent = user_agent or settings.fetch_user_agent
        self._transport = transport

    async def fetch_html(self, url: str, referer: Optional[str] = None) -> str:
        """GET the page and return its body text; raises FetchError on transport or HTTP errors"""
        headers = {"User-Agent": self.user_agent, **BROWSER_HEADERS}
        if referer:
            headers["Referer"] = referer
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.get(url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.warning(f"Fetching {url} failed: {e}")
            raise FetchError(str(e))

        if resp.status_code >= 400:
            logger.warning(f"Fetching {url} returned HTTP {resp.status_code}")
            raise FetchError(f"HTTP {resp.status_code}: {resp.reason_phrase}", status=resp.status_code)
        return resp.text


def get_page_fetcher() -> PageFetcher:
    return PageFetcher()
