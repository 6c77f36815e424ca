import asyncio
import logging
from typing import Any, Dict, List, Optional

from app.config.action_sets import ACTION_SETS, PROMPT_FALLBACK_ACTIONS, THIN_CONTENT_ACTIONS, URL_ONLY_ACTIONS
from app.core.exceptions import AppError, ValidationError
from app.core.llm import GroqClient, parse_json_response
from app.modules.analyzer import prompts
from app.modules.analyzer.catalog import resolve_action_sets, select_action_set
from app.modules.analyzer.schemas import (
    ActionItem,
    AnalyzeLinkRequest,
    AnalyzeLinkResponse,
    GenerateActionsRequest,
    PromptAction,
)
from app.modules.scraper.extractor import extract_page, extract_readable
from app.modules.scraper.fetcher import FetchError, PageFetcher, is_valid_url
from app.modules.transcripts.service import TranscriptService
from app.modules.transcripts.youtube import detect_youtube_content_type, extract_video_id

logger = logging.getLogger(__name__)

DEFAULT_PURPOSE = "Web content ready for AI analysis"
TRANSCRIPT_MISSING = (
    "Transcript could not be retrieved for this video. "
    "Please check if the video has subtitles or try another link."
)
READABLE_BUDGET = 8000


def clean_items(items: Any, fields: List[str], optional: List[str] = ()) -> List[Dict[str, Any]]:
    """Model-written items with a string title and string (or null) fields; anything else is dropped"""
    if not isinstance(items, list):
        return []
    cleaned = []
    for item in items:
        if not isinstance(item, dict):
            continue
        title = item.get("title")
        if not isinstance(title, str) or not title.strip():
            continue
        values = {"title": title}
        for field in fields:
            value = item.get(field)
            if value is None:
                value = ""
            if not isinstance(value, str):
                break
            values[field] = value
        else:
            for field in optional:
                value = item.get(field)
                if isinstance(value, str):
                    values[field] = value
            cleaned.append(values)
    return cleaned


def prompt_fallback(title: str, url: str) -> List[Dict[str, str]]:
    """Canned suggestions picked from the page title and URL"""
    lowered = (title or "").lower()
    if "github" in lowered or "github.com" in (url or ""):
        return PROMPT_FALLBACK_ACTIONS["github"]
    if "blog" in lowered or "article" in lowered:
        return PROMPT_FALLBACK_ACTIONS["article"]
    return PROMPT_FALLBACK_ACTIONS["default"]


class AnalyzerService:
    def __init__(self, llm: GroqClient, fetcher: PageFetcher, transcripts: TranscriptService):
        self.llm = llm
        self.fetcher = fetcher
        self.transcripts = transcripts

    async def _video_analysis(self, video_id: str) -> Dict[str, Any]:
        logger.info(f"YouTube video detected, ID: {video_id}")
        transcript = await self.transcripts.fetch_transcript(video_id)
        if not transcript:
            return {"content_available": False, "content_message": TRANSCRIPT_MISSING}
        summary = await self.transcripts.summarize_transcript(transcript, video_id)
        return {"content_analysis": summary, "content_available": True}

    async def _read_page(self, link: str) -> Dict[str, str]:
        try:
            html = await self.fetcher.fetch_html(link)
        except FetchError as e:
            logger.info(f"Page extraction skipped for {link}: {e}")
            return {}
        return await asyncio.to_thread(extract_page, html)

    async def generate_dynamic_actions(
        self, link: str, content_type: str, summary: Optional[str] = None
    ) -> List[Dict[str, str]]:
        """Three LLM-invented actions for a link whose catalog rotation is exhausted"""
        try:
            reply = await self.llm.complete(
                prompts.dynamic_actions_prompt(link, content_type, summary),
                max_tokens=500,
                temperature=0.7,
            )
        except AppError as e:
            logger.error(f"Error generating dynamic actions: {e.error}")
            return ACTION_SETS["default"][0]

        parsed = parse_json_response(reply)
        actions = clean_items(parsed.get("actions") if parsed else None, ["description"], optional=["icon"])
        if not actions:
            logger.warning("Dynamic action generation returned nothing usable")
            return ACTION_SETS["default"][0]
        return actions

    async def analyze_link(self, request: AnalyzeLinkRequest) -> AnalyzeLinkResponse:
        link = (request.link or "").strip()
        if not link:
            raise ValidationError("Link is required")
        if not is_valid_url(link):
            return AnalyzeLinkResponse(type="insufficient", purpose="Invalid URL provided", actions=[])

        logger.info(f"Analyzing link: {link}")
        video_id = extract_video_id(link)
        video_fields = await self._video_analysis(video_id) if video_id else {}

        manual_type = request.manual_type
        if manual_type and manual_type in ACTION_SETS:
            logger.info(f"Using manual content type: {manual_type}")
            rotation = select_action_set(ACTION_SETS[manual_type], request.action_set)
            return AnalyzeLinkResponse(
                type=manual_type,
                purpose=f"User-selected {manual_type} content",
                actions=[ActionItem(**action) for action in rotation.actions],
                total_action_sets=rotation.total,
                next_action_set=rotation.next_action_set,
                **video_fields,
            )

        page = await self._read_page(link)
        youtube_type = detect_youtube_content_type(link)
        reply = await self.llm.complete(
            prompts.classification_prompt(link, youtube_type, page.get("title"), page.get("text")),
            max_tokens=300,
            temperature=0.1,
        )
        parsed = parse_json_response(reply)

        if parsed is None:
            logger.error(f"Failed to parse AI response: {reply!r}")
            default_sets = ACTION_SETS["default"]
            return AnalyzeLinkResponse(
                type="unknown",
                purpose=DEFAULT_PURPOSE,
                title=page.get("title") or None,
                actions=[ActionItem(**action) for action in default_sets[0]],
                total_action_sets=len(default_sets),
                next_action_set=1,
                **video_fields,
            )

        content_type = str(parsed.get("type") or "unknown")
        purpose = str(parsed.get("purpose") or DEFAULT_PURPOSE)
        action_sets = resolve_action_sets(content_type)
        rotation = select_action_set(action_sets, request.action_set)

        if request.generate_dynamic_actions and rotation.exhausted:
            actions = await self.generate_dynamic_actions(
                link, content_type.lower(), video_fields.get("content_analysis")
            )
            return AnalyzeLinkResponse(
                type=content_type,
                purpose=purpose,
                title=page.get("title") or None,
                actions=[ActionItem(**action) for action in actions],
                total_action_sets=rotation.total,
                is_dynamic=True,
                **video_fields,
            )

        return AnalyzeLinkResponse(
            type=content_type,
            purpose=purpose,
            title=page.get("title") or None,
            actions=[ActionItem(**action) for action in rotation.actions],
            total_action_sets=rotation.total,
            next_action_set=rotation.next_action_set,
            **video_fields,
        )

    async def analyze_url(self, url: Optional[str]) -> List[PromptAction]:
        if not url:
            raise ValidationError("Missing url")
        if not self.llm.configured:
            raise AppError("GROQ_API_KEY is missing from server environment.", code="CONFIGURATION_ERROR")

        logger.info(f"Analyzing URL: {url}")
        try:
            html = await self.fetcher.fetch_html(url)
        except FetchError as e:
            logger.error(f"Content extraction failed for {url}: {e}")
            return [PromptAction(**action) for action in URL_ONLY_ACTIONS]

        page = await asyncio.to_thread(extract_readable, html, READABLE_BUDGET)
        title, text = page["title"], page["text"]
        if not title or not text or len(text) < 10:
            logger.warning("Insufficient content extracted, using URL-based analysis")
            return [PromptAction(**action) for action in THIN_CONTENT_ACTIONS]

        reply = await self.llm.complete(
            prompts.suggest_actions_prompt(title, text),
            system=prompts.ANALYZE_URL_SYSTEM_PROMPT,
            max_tokens=512,
            temperature=0.3,
        )
        actions = [
            PromptAction(**item)
            for item in clean_items(parse_json_response(reply, expect="array"), ["description", "prompt"])
            if item["description"] and item["prompt"]
        ]
        if not actions:
            logger.error(f"Failed to parse Groq response: {reply!r}")
            return [PromptAction(**action) for action in prompt_fallback(title, url)]
        return actions

    async def generate_actions(self, request: GenerateActionsRequest) -> List[PromptAction]:
        if not request.type or not request.content:
            raise ValidationError("Missing type or content")

        reply = await self.llm.complete(
            prompts.generate_actions_prompt(request.type, request.purpose, request.content, request.url),
            system=prompts.GENERATE_ACTIONS_SYSTEM_PROMPT,
            max_tokens=512,
            temperature=0.3,
        )
        actions = [
            item for item in clean_items(parse_json_response(reply, expect="array"), ["description", "prompt"])
            if item["prompt"].strip()
        ]
        if not actions:
            raise AppError(
                "Failed to parse AI response",
                code="AI_PARSE_ERROR",
                extra={"details": reply},
            )
        return [PromptAction(**item) for item in actions]
