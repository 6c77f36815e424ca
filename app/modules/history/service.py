import logging
from postgrest.exceptions import APIError
from supabase import Client
from app.core.exceptions import NotFoundError, ValidationError, database_error
from app.modules.history.schemas import HistoryCreate, HistoryResponse
from app.modules.scraper.fetcher import is_valid_url
from typing import List

logger = logging.getLogger(__name__)

TABLE = "link_history"


class HistoryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_history(self, user_id: str) -> List[HistoryResponse]:
        """Analyzed links of a user, newest first"""
        try:
            result = self.supabase.table(TABLE)\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
        except APIError as e:
            raise database_error(e, "link history")
        return [HistoryResponse(**entry) for entry in result.data or []]

    def add_entry(self, user_id: str, entry: HistoryCreate) -> HistoryResponse:
        if not entry.link:
            raise ValidationError("Missing link", message="link is required")
        if not is_valid_url(entry.link):
            raise ValidationError("Invalid URL provided")

        record = entry.model_dump(exclude_none=True)
        record["user_id"] = user_id
        try:
            result = self.supabase.table(TABLE).insert(record).execute()
        except APIError as e:
            raise database_error(e, "link history")
        return HistoryResponse(**result.data[0])

    def delete_entry(self, entry_id: str, user_id: str) -> None:
        try:
            existing = self.supabase.table(TABLE)\
                .select("id")\
                .eq("id", entry_id)\
                .eq("user_id", user_id)\
                .execute()
            if not existing.data:
                logger.warning(f"History entry not found or access denied: id={entry_id} user_id={user_id}")
                raise NotFoundError(
                    "History entry not found",
                    message="History entry not found or you do not have permission to access it",
                )
            self.supabase.table(TABLE)\
                .delete()\
                .eq("id", entry_id)\
                .eq("user_id", user_id)\
                .execute()
        except APIError as e:
            raise database_error(e, "link history")
