import asyncio
import logging
from typing import Dict

from app.core.exceptions import AppError, UpstreamServiceError, ValidationError
from app.modules.scraper.extractor import clean_extract, extract_readable
from app.modules.scraper.fetcher import FetchError, PageFetcher, is_valid_url
from app.modules.scraper.schemas import FetchUrlResponse, ScrapeContentResponse

logger = logging.getLogger(__name__)

READABLE_BUDGET = 8000
SCRAPE_BUDGET = 5000

EXTRACTION_FALLBACK = {
    "title": "Web Page",
    "text": "Unable to extract content from this URL. Please try a different link.",
    "description": "Content extraction failed",
}


class ScraperService:
    def __init__(self, fetcher: PageFetcher):
        self.fetcher = fetcher

    async def read_page(self, url: str) -> Dict[str, str]:
        """Download and run readability extraction. Raises FetchError."""
        html = await self.fetcher.fetch_html(url)
        return await asyncio.to_thread(extract_readable, html, READABLE_BUDGET)

    async def fetch_url(self, url: str) -> FetchUrlResponse:
        """Readable title/text/description for a page"""
        if not url:
            raise ValidationError("Missing url")
        logger.info(f"Fetching content from: {url}")
        try:
            page = await self.read_page(url)
        except FetchError as e:
            logger.error(f"Content extraction failed: {e}")
            raise AppError(
                "Content extraction failed",
                code="EXTRACTION_FAILED",
                status_code=500,
                extra={"details": str(e), "fallback": dict(EXTRACTION_FALLBACK)},
            )
        logger.info(
            "Extracted content: title=%r text_length=%d",
            page["title"][:100],
            len(page["text"]),
        )
        return FetchUrlResponse(**page)

    async def scrape_content(self, url: str) -> ScrapeContentResponse:
        """Cleaned page content for display"""
        if not url:
            raise ValidationError("URL is required")
        if not is_valid_url(url):
            raise ValidationError("Invalid URL provided")

        logger.info(f"Scraping URL: {url}")
        try:
            html = await self.fetcher.fetch_html(url)
        except FetchError as e:
            message = f"Failed to fetch URL: HTTP {e.status}" if e.status else f"Failed to fetch URL: {e}"
            raise UpstreamServiceError(message, extra={"status": "error"})

        page = await asyncio.to_thread(clean_extract, html, SCRAPE_BUDGET)
        logger.info(f"Scraping completed for: {url} (content length {len(page['content'])})")
        return ScrapeContentResponse(
            title=page["title"] or "No title found",
            description=page["description"] or "No description available",
            content=page["content"],
            url=url,
        )
