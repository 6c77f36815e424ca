from pydantic import BaseModel
from typing import Optional


class ExecuteActionRequest(BaseModel):
    link: Optional[str] = None
    action: Optional[str] = None


class ExecuteActionResponse(BaseModel):
    content: str
    url: str
    action: str
    hasScrapedContent: bool


class ActionSpec(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    prompt: Optional[str] = None


class PerformActionRequest(BaseModel):
    type: Optional[str] = None
    purpose: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
    action: Optional[ActionSpec] = None


class PerformActionResponse(BaseModel):
    result: str
