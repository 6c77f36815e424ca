from fastapi import APIRouter, Depends
from app.core.llm import GroqClient, get_llm_client
from app.modules.analyzer.schemas import (
    AnalyzeLinkRequest,
    AnalyzeLinkResponse,
    AnalyzeUrlRequest,
    GenerateActionsRequest,
    PromptAction,
)
from app.modules.analyzer.service import AnalyzerService
from app.modules.scraper.fetcher import PageFetcher, get_page_fetcher
from app.modules.transcripts.routes import get_transcript_service
from app.modules.transcripts.service import TranscriptService
from typing import List

router = APIRouter(tags=["analyzer"])


def get_analyzer_service(
    llm: GroqClient = Depends(get_llm_client),
    fetcher: PageFetcher = Depends(get_page_fetcher),
    transcripts: TranscriptService = Depends(get_transcript_service)
) -> AnalyzerService:
    return AnalyzerService(llm, fetcher, transcripts)


@router.post(
    "/analyze-link",
    response_model=AnalyzeLinkResponse,
    response_model_exclude_none=True
)
async def analyze_link(
    body: AnalyzeLinkRequest,
    service: AnalyzerService = Depends(get_analyzer_service)
):
    """
    Classify a link and return the matching set of suggested actions.

    `actionSet` walks through the catalog for the detected content type;
    `nextActionSet` is omitted once the rotation wraps around.
    """
    return await service.analyze_link(body)


@router.post("/analyze-url", response_model=List[PromptAction])
async def analyze_url(
    body: AnalyzeUrlRequest,
    service: AnalyzerService = Depends(get_analyzer_service)
):
    """Three prompt-carrying actions suggested from the page's readable text"""
    return await service.analyze_url(body.url)


@router.post("/generate-actions", response_model=List[PromptAction])
async def generate_actions(
    body: GenerateActionsRequest,
    service: AnalyzerService = Depends(get_analyzer_service)
):
    return await service.generate_actions(body)
