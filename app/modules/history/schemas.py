from pydantic import BaseModel
from typing import Any, Dict, Optional
from datetime import datetime


class HistoryCreate(BaseModel):
    link: Optional[str] = None
    title: Optional[str] = None
    content_type: Optional[str] = None
    summary: Optional[str] = None
    analysis_data: Optional[Dict[str, Any]] = None


class HistoryResponse(BaseModel):
    id: str
    user_id: str
    link: str
    title: Optional[str] = None
    content_type: Optional[str] = None
    summary: Optional[str] = None
    analysis_data: Optional[Dict[str, Any]] = None
    created_at: datetime

    class Config:
        from_attributes = True
