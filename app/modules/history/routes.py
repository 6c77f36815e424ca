from fastapi import APIRouter, Depends, Response
from app.core.dependencies import require_user_id
from app.database.supabase_client import get_service_supabase
from app.modules.history.schemas import HistoryCreate, HistoryResponse
from app.modules.history.service import HistoryService
from app.modules.notes.routes import LIST_CACHE_CONTROL
from supabase import Client
from typing import List

router = APIRouter(prefix="/link_history", tags=["history"])


def get_history_service(supabase: Client = Depends(get_service_supabase)) -> HistoryService:
    return HistoryService(supabase)


@router.get("", response_model=List[HistoryResponse])
async def list_history(
    response: Response,
    user_id: str = Depends(require_user_id),
    service: HistoryService = Depends(get_history_service)
):
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return service.list_history(user_id)


@router.post("", response_model=HistoryResponse, status_code=201)
async def add_history(
    body: HistoryCreate,
    user_id: str = Depends(require_user_id),
    service: HistoryService = Depends(get_history_service)
):
    """Record an analyzed link"""
    return service.add_entry(user_id, body)


@router.delete("/{entry_id}", status_code=204)
async def delete_history(
    entry_id: str,
    user_id: str = Depends(require_user_id),
    service: HistoryService = Depends(get_history_service)
):
    service.delete_entry(entry_id, user_id)
    return Response(status_code=204)
