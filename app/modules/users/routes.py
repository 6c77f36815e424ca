from fastapi import APIRouter, Depends
from app.core.dependencies import get_current_user_id
from app.database.supabase_client import get_service_supabase
from app.modules.users.schemas import ProfileUpdate, ProfileResponse, SettingsUpdate, SettingsResponse
from app.modules.users.service import UserService
from supabase import Client

router = APIRouter(tags=["users"])


def get_user_service(supabase: Client = Depends(get_service_supabase)) -> UserService:
    return UserService(supabase)


@router.get("/profile", response_model=ProfileResponse)
async def get_profile(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    return service.get_profile(user_id)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    body: ProfileUpdate,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """Update the signed-in user's display name"""
    return service.update_profile(user_id, body)


@router.get("/settings", response_model=SettingsResponse)
async def get_settings(
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    return service.get_settings(user_id)


@router.put("/settings", response_model=SettingsResponse)
async def update_settings(
    body: SettingsUpdate,
    user_id: str = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """Toggle update emails for the signed-in user"""
    return service.update_settings(user_id, body)
