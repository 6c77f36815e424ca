from fastapi import APIRouter, Depends
from app.core.llm import GroqClient, get_llm_client
from app.modules.scraper.fetcher import PageFetcher, get_page_fetcher
from app.modules.transcripts.schemas import TranscriptResponse, ScrapeSummaryRequest, ScrapeSummaryResponse
from app.modules.transcripts.service import TranscriptService
from typing import Optional

router = APIRouter(tags=["transcripts"])


def get_transcript_service(
    llm: GroqClient = Depends(get_llm_client),
    fetcher: PageFetcher = Depends(get_page_fetcher)
) -> TranscriptService:
    return TranscriptService(llm, fetcher)


@router.get("/getTranscript", response_model=TranscriptResponse)
async def get_transcript(
    videoId: Optional[str] = None,
    service: TranscriptService = Depends(get_transcript_service)
):
    """Captions of a YouTube video joined into one string"""
    return await service.get_transcript(videoId)


@router.post("/scrapeAndSummarize", response_model=ScrapeSummaryResponse)
async def scrape_and_summarize(
    body: ScrapeSummaryRequest,
    service: TranscriptService = Depends(get_transcript_service)
):
    """Readability extraction of an article followed by an LLM summary"""
    return await service.scrape_and_summarize(body.url)
