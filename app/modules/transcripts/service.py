import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple

import httpx
import trafilatura
from bs4 import BeautifulSoup
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api._errors import CouldNotRetrieveTranscript, VideoUnavailable

from app.config import settings
from app.core.exceptions import AppError, NotFoundError, ValidationError
from app.core.llm import GroqClient
from app.modules.scraper.extractor import collapse_whitespace
from app.modules.scraper.fetcher import FetchError, PageFetcher
from app.modules.transcripts.schemas import ArticleMetadata, ScrapeSummaryResponse, TranscriptResponse

logger = logging.getLogger(__name__)

SUMMARY_FAILED = "Unable to generate summary due to an error"
ARTICLE_FALLBACK_BUDGET = 7000

TRANSCRIPT_SYSTEM_PROMPT = (
    "You are an expert at analyzing YouTube video transcripts. Provide accurate, specific analysis "
    "based on the actual transcript content. Be detailed and helpful."
)

TRANSCRIPT_SUMMARY_PROMPT = """You are analyzing a YouTube video transcript. Please provide a comprehensive summary with the following structure:

Video ID: {video_id}

Transcript:
{transcript}

Please create a well-formatted summary with:

**Video Overview**
- What is this video about based on the transcript?
- What type of content is this (tutorial, review, entertainment, educational, etc.)?

**Key Topics Covered**
- What specific topics, subjects, or themes does this video discuss?
- What are the main points or key takeaways?

**Content Analysis**
- What are the most important insights from the video?
- What value does this video provide to viewers?

**Target Audience**
- Who would be most interested in this video?
- What level of expertise is required?

**Key Insights**
- What are the most important aspects of this video?
- What makes this content unique or valuable?

Format the response with clear headings and use bullet points where appropriate. Be specific and accurate based on the actual transcript content."""

ARTICLE_SUMMARY_PROMPT = """You are an expert summarizer. Given this article, generate a useful summary:

Title: {title}
Excerpt: {excerpt}

Content:
{content}

Respond with the following structure:

**Overview**
- Topic summary

**Key Points**
- Main insights

**Relevance**
- Who should read this and why"""


class TranscriptUnavailable(Exception):
    def __init__(self, reason: str = "Transcript not available"):
        super().__init__(reason)
        self.reason = reason


def read_article(html: str) -> Tuple[str, str, str, str]:
    """Title, excerpt, lead image and main text of an article page"""
    content = collapse_whitespace(trafilatura.extract(html) or "")
    title = excerpt = lead_image_url = ""
    metadata = trafilatura.extract_metadata(html)
    if metadata is not None:
        title = metadata.title or ""
        excerpt = metadata.description or ""
        lead_image_url = metadata.image or ""

    if not content or len(content) < 200:
        logger.warning("Readable content too short, falling back to full page text")
        soup = BeautifulSoup(html, "html.parser")
        if not title and soup.title:
            title = soup.title.get_text().strip()
        if not excerpt:
            description = soup.find("meta", attrs={"name": "description"})
            excerpt = description.get("content", "") if description else ""
        body = soup.body.get_text(" ") if soup.body else ""
        content = collapse_whitespace(body)[:ARTICLE_FALLBACK_BUDGET]
    return title, excerpt, lead_image_url, content


class TranscriptService:
    def __init__(
        self,
        llm: GroqClient,
        fetcher: PageFetcher,
        api_url: Optional[str] = None,
        ytt_api: Any = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.llm = llm
        self.fetcher = fetcher
        self.api_url = api_url if api_url is not None else settings.transcript_api_url
        self._ytt_api = ytt_api
        self._transport = transport

    @property
    def ytt_api(self):
        if self._ytt_api is None:
            self._ytt_api = YouTubeTranscriptApi()
        return self._ytt_api

    def _fetch_snippets(self, video_id: str) -> List[str]:
        try:
            fetched = self.ytt_api.fetch(video_id)
        except VideoUnavailable:
            raise TranscriptUnavailable("Video unavailable")
        except CouldNotRetrieveTranscript:
            raise TranscriptUnavailable()
        texts = [snippet.text for snippet in fetched]
        if not texts:
            raise TranscriptUnavailable()
        return texts

    async def fetch_segments(self, video_id: str) -> List[str]:
        """Caption lines for a video, fetched in-process. Raises TranscriptUnavailable."""
        return await asyncio.to_thread(self._fetch_snippets, video_id)

    async def _fetch_remote(self, video_id: str) -> Optional[str]:
        url = f"{self.api_url.rstrip('/')}/getTranscript"
        async with httpx.AsyncClient(timeout=settings.fetch_timeout_seconds, transport=self._transport) as client:
            resp = await client.get(url, params={"videoId": video_id}, headers={"Accept": "application/json"})
        if resp.status_code == 404:
            logger.info("Transcript not available for this video")
            return None
        if resp.status_code >= 400:
            logger.error(f"Transcript API error: {resp.status_code} {resp.reason_phrase}")
            return None
        data = resp.json()
        if data.get("success") and data.get("transcript"):
            return data["transcript"]
        logger.info("No transcript data in response")
        return None

    async def fetch_transcript(self, video_id: str) -> Optional[str]:
        """Full transcript text, or None when it cannot be retrieved"""
        logger.info(f"Fetching transcript for video ID: {video_id}")
        try:
            if self.api_url:
                transcript = await self._fetch_remote(video_id)
            else:
                transcript = " ".join(await self.fetch_segments(video_id))
        except TranscriptUnavailable as e:
            logger.info(f"{e.reason} for video {video_id}")
            return None
        except Exception as e:
            logger.error(f"Error fetching transcript for {video_id}: {e}")
            return None
        if transcript:
            logger.info(f"Retrieved transcript, length: {len(transcript)} characters")
        return transcript or None

    async def summarize_transcript(self, transcript: str, video_id: str) -> str:
        try:
            summary = await self.llm.complete(
                TRANSCRIPT_SUMMARY_PROMPT.format(video_id=video_id, transcript=transcript),
                system=TRANSCRIPT_SYSTEM_PROMPT,
                max_tokens=2000,
                temperature=0.1,
            )
        except AppError as e:
            logger.error(f"Error summarizing transcript: {e.error}")
            return SUMMARY_FAILED
        return summary or "Unable to generate summary"

    async def get_transcript(self, video_id: Optional[str]) -> TranscriptResponse:
        if not video_id:
            raise ValidationError(
                "Missing videoId",
                extra={"example": "/api/getTranscript?videoId=dQw4w9WgXcQ"},
            )
        try:
            segments = await self.fetch_segments(video_id)
        except TranscriptUnavailable as e:
            raise NotFoundError(e.reason, extra={"videoId": video_id})
        except Exception as e:
            logger.error(f"Transcript fetch error: {e}")
            raise AppError("Internal server error", code="INTERNAL_ERROR", extra={"videoId": video_id})

        return TranscriptResponse(
            videoId=video_id,
            transcript=" ".join(segments),
            segments=len(segments),
            timestamp=datetime.now(timezone.utc),
        )

    async def scrape_and_summarize(self, url: Optional[str]) -> ScrapeSummaryResponse:
        if not url:
            raise ValidationError("Missing URL in request body")

        try:
            html = await self.fetcher.fetch_html(url, referer=url)
        except FetchError as e:
            logger.error(f"Error in scrapeAndSummarize: {e}")
            raise AppError("Failed to scrape and summarize", message=str(e))

        title, excerpt, lead_image_url, content = await asyncio.to_thread(read_article, html)

        summary = await self.llm.complete(
            ARTICLE_SUMMARY_PROMPT.format(title=title, excerpt=excerpt, content=content),
            system="Respond only with the summary. No extra commentary.",
            max_tokens=1000,
            temperature=0.5,
        )
        return ScrapeSummaryResponse(
            summary=summary or "Summary unavailable",
            metadata=ArticleMetadata(title=title, excerpt=excerpt, lead_image_url=lead_image_url),
        )
