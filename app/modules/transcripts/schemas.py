from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class TranscriptResponse(BaseModel):
    success: bool = True
    videoId: str
    transcript: str
    segments: int
    timestamp: datetime


class ScrapeSummaryRequest(BaseModel):
    url: Optional[str] = None


class ArticleMetadata(BaseModel):
    title: str = ""
    excerpt: str = ""
    lead_image_url: str = ""


class ScrapeSummaryResponse(BaseModel):
    success: bool = True
    summary: str
    metadata: ArticleMetadata
