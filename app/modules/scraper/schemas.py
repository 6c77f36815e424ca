from pydantic import BaseModel
from typing import Optional


class UrlRequest(BaseModel):
    url: Optional[str] = None


class FetchUrlResponse(BaseModel):
    title: str
    text: str
    description: str


class ScrapeContentResponse(BaseModel):
    title: str
    description: str
    content: str
    url: str
    status: str = "success"
