import asyncio
import logging
from typing import Optional

from app.core.exceptions import ValidationError
from app.core.llm import GroqClient
from app.modules.actions import prompts
from app.modules.actions.schemas import (
    ExecuteActionRequest,
    ExecuteActionResponse,
    PerformActionRequest,
    PerformActionResponse,
)
from app.modules.scraper.extractor import clean_extract
from app.modules.scraper.fetcher import FetchError, PageFetcher, hostname, is_valid_url
from app.modules.transcripts.service import TranscriptService
from app.modules.transcripts.youtube import extract_video_id

logger = logging.getLogger(__name__)

CONTEXT_BUDGET = 3000
PERFORM_CONTENT_BUDGET = 2000
EXECUTE_NOISE_TAGS = ["script", "style", "nav", "header", "footer"]


class ActionService:
    def __init__(self, llm: GroqClient, fetcher: PageFetcher, transcripts: TranscriptService):
        self.llm = llm
        self.fetcher = fetcher
        self.transcripts = transcripts

    async def _scrape(self, link: str) -> Optional[dict]:
        try:
            html = await self.fetcher.fetch_html(link)
        except FetchError as e:
            logger.info(f"Scraping failed for {link}: {e}")
            return None
        page = await asyncio.to_thread(
            clean_extract, html, budget=CONTEXT_BUDGET, noise_tags=EXECUTE_NOISE_TAGS, fallback=False
        )
        return page if page["content"] else None

    async def execute_action(self, request: ExecuteActionRequest) -> ExecuteActionResponse:
        """Run a catalog action against a link with whatever page or transcript context is available"""
        link, action = request.link, request.action
        if not link or not action:
            raise ValidationError("Link and action are required")
        if not is_valid_url(link):
            raise ValidationError("Invalid URL provided")

        logger.info(f"Executing action {action!r} on {link}")
        context = ""
        video_id = extract_video_id(link)
        if video_id:
            transcript = await self.transcripts.fetch_transcript(video_id)
            context += prompts.transcript_context(transcript) + "\n"

        page = await self._scrape(link)
        if page:
            context += prompts.page_context(page)
        else:
            context += prompts.url_only_context(link, hostname(link))

        content = await self.llm.complete(
            prompts.EXECUTE_PROMPT.format(link=link, action=action, context=context),
            system=prompts.EXECUTE_SYSTEM_PROMPT,
            max_tokens=2000,
            temperature=0.3,
        )
        return ExecuteActionResponse(
            content=content or "No content generated",
            url=link,
            action=action,
            hasScrapedContent=page is not None,
        )

    async def perform_action(self, request: PerformActionRequest) -> PerformActionResponse:
        action = request.action
        if action is None or not action.prompt:
            raise ValidationError("Missing action or prompt")

        prompt = prompts.PERFORM_PROMPT.format(
            type=request.type,
            purpose=request.purpose,
            url=request.url,
            content=(request.content or "")[:PERFORM_CONTENT_BUDGET],
            title=action.title,
            description=action.description,
            prompt=action.prompt,
        )
        result = await self.llm.complete(
            prompt,
            system=prompts.PERFORM_SYSTEM_PROMPT,
            max_tokens=1024,
            temperature=0.3,
        )
        return PerformActionResponse(result=result)
