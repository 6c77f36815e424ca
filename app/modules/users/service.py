from datetime import datetime, timezone
from postgrest.exceptions import APIError
from supabase import Client
from app.core.exceptions import NotFoundError, database_error
from app.modules.users.schemas import ProfileUpdate, ProfileResponse, SettingsUpdate, SettingsResponse
from typing import Optional


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_profile(self, user_id: str) -> Optional[ProfileResponse]:
        try:
            result = self.supabase.table("profiles")\
                .select("id, email, full_name, updated_at")\
                .eq("id", user_id)\
                .limit(1)\
                .execute()
        except APIError as e:
            raise database_error(e, "profiles")
        if not result.data:
            return None
        return ProfileResponse(**result.data[0])

    def get_profile(self, user_id: str) -> ProfileResponse:
        profile = self.find_profile(user_id)
        if profile is None:
            raise NotFoundError("Profile not found")
        return profile

    def update_profile(self, user_id: str, profile: ProfileUpdate) -> ProfileResponse:
        """Update the display name on a user's profile"""
        update_data = {"updated_at": datetime.now(timezone.utc).isoformat()}
        if profile.full_name is not None:
            update_data["full_name"] = profile.full_name.strip()

        try:
            result = self.supabase.table("profiles")\
                .update(update_data)\
                .eq("id", user_id)\
                .execute()
        except APIError as e:
            raise database_error(e, "profiles")

        if not result.data:
            raise NotFoundError("Profile not found")
        return ProfileResponse(**result.data[0])

    def get_settings(self, user_id: str) -> SettingsResponse:
        """Stored preferences, or defaults when the user never saved any"""
        try:
            result = self.supabase.table("user_settings")\
                .select("user_id, notifications_enabled, updated_at")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except APIError as e:
            raise database_error(e, "user settings")
        if not result.data:
            return SettingsResponse(user_id=user_id)
        return SettingsResponse(**result.data[0])

    def update_settings(self, user_id: str, user_settings: SettingsUpdate) -> SettingsResponse:
        try:
            result = self.supabase.table("user_settings")\
                .upsert({
                    "user_id": user_id,
                    "notifications_enabled": user_settings.notifications_enabled,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                }, on_conflict="user_id")\
                .execute()
        except APIError as e:
            raise database_error(e, "user settings")
        return SettingsResponse(**result.data[0])
