import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from postgrest.exceptions import APIError
from supabase import Client

from app.core.exceptions import NotFoundError, ValidationError, database_error
from app.modules.notes.schemas import (
    CONTENT_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    NoteCreate,
    NoteResponse,
    NoteUpdate,
)

logger = logging.getLogger(__name__)

TABLE = "ai_notes"


def validate_note(title: Optional[str], content: Optional[str]) -> Tuple[str, str]:
    """Trimmed title and content; raises ValidationError unless both are present and within limits"""
    title = (title or "").strip()
    content = (content or "").strip()
    if not title or not content:
        raise ValidationError(
            "Missing title or content",
            message="Both title and content are required",
        )
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError("Title too long", message=f"Title must be {TITLE_MAX_LENGTH} characters or less")
    if len(content) > CONTENT_MAX_LENGTH:
        raise ValidationError("Content too long", message="Content must be 10,000 characters or less")
    return title, content


class NoteService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _ensure_owned(self, note_id: str, user_id: str) -> None:
        result = self.supabase.table(TABLE)\
            .select("id")\
            .eq("id", note_id)\
            .eq("user_id", user_id)\
            .execute()
        if not result.data:
            logger.warning(f"Note not found or access denied: id={note_id} user_id={user_id}")
            raise NotFoundError(
                "Note not found",
                message="Note not found or you do not have permission to access it",
            )

    def list_notes(self, user_id: str) -> List[NoteResponse]:
        """Notes of one user, newest first"""
        try:
            result = self.supabase.table(TABLE)\
                .select("*")\
                .eq("user_id", user_id)\
                .order("created_at", desc=True)\
                .execute()
        except APIError as e:
            raise database_error(e, "notes")
        return [NoteResponse(**note) for note in result.data or []]

    def create_note(self, user_id: str, note: NoteCreate) -> NoteResponse:
        title, content = validate_note(note.title, note.content)
        try:
            result = self.supabase.table(TABLE)\
                .insert({
                    "user_id": user_id,
                    "title": title,
                    "content": content,
                })\
                .execute()
        except APIError as e:
            raise database_error(e, "notes")
        logger.info(f"Created note for user {user_id}")
        return NoteResponse(**result.data[0])

    def get_note(self, note_id: str, user_id: str) -> NoteResponse:
        try:
            result = self.supabase.table(TABLE)\
                .select("*")\
                .eq("id", note_id)\
                .eq("user_id", user_id)\
                .execute()
        except APIError as e:
            raise database_error(e, "notes")
        if not result.data:
            raise NotFoundError(
                "Note not found",
                message="Note not found or you do not have permission to access it",
            )
        return NoteResponse(**result.data[0])

    def update_note(self, note_id: str, user_id: str, note: NoteUpdate) -> NoteResponse:
        title, content = validate_note(note.title, note.content)
        try:
            self._ensure_owned(note_id, user_id)
            result = self.supabase.table(TABLE)\
                .update({
                    "title": title,
                    "content": content,
                    "updated_at": datetime.now(timezone.utc).isoformat(),
                })\
                .eq("id", note_id)\
                .eq("user_id", user_id)\
                .execute()
        except APIError as e:
            raise database_error(e, "notes")
        if not result.data:
            raise NotFoundError("Note not found")
        logger.info(f"Successfully updated note: {note_id}")
        return NoteResponse(**result.data[0])

    def delete_note(self, note_id: str, user_id: str) -> None:
        try:
            self._ensure_owned(note_id, user_id)
            self.supabase.table(TABLE)\
                .delete()\
                .eq("id", note_id)\
                .eq("user_id", user_id)\
                .execute()
        except APIError as e:
            raise database_error(e, "notes")
        logger.info(f"Successfully deleted note: {note_id}")
