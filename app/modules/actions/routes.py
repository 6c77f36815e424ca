from fastapi import APIRouter, Depends
from app.core.llm import GroqClient, get_llm_client
from app.modules.actions.schemas import (
    ExecuteActionRequest,
    ExecuteActionResponse,
    PerformActionRequest,
    PerformActionResponse,
)
from app.modules.actions.service import ActionService
from app.modules.scraper.fetcher import PageFetcher, get_page_fetcher
from app.modules.transcripts.routes import get_transcript_service
from app.modules.transcripts.service import TranscriptService

router = APIRouter(tags=["actions"])


def get_action_service(
    llm: GroqClient = Depends(get_llm_client),
    fetcher: PageFetcher = Depends(get_page_fetcher),
    transcripts: TranscriptService = Depends(get_transcript_service)
) -> ActionService:
    return ActionService(llm, fetcher, transcripts)


@router.post("/execute-action", response_model=ExecuteActionResponse)
async def execute_action(
    body: ExecuteActionRequest,
    service: ActionService = Depends(get_action_service)
):
    """Perform the named action on a link and return formatted text"""
    return await service.execute_action(body)


@router.post("/perform-action", response_model=PerformActionResponse)
async def perform_action(
    body: PerformActionRequest,
    service: ActionService = Depends(get_action_service)
):
    return await service.perform_action(body)
