from pydantic import BaseModel
from typing import Optional
from datetime import datetime

TITLE_MAX_LENGTH = 255
CONTENT_MAX_LENGTH = 10000


class NoteCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class NoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class NoteResponse(BaseModel):
    id: str
    user_id: str
    title: str
    content: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class GuestNoteCreate(BaseModel):
    title: str
    content: Optional[str] = None


class GuestNoteUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class GuestNoteResponse(BaseModel):
    id: str
    title: str
    content: Optional[str] = None
    created_at: str
    updated_at: str
