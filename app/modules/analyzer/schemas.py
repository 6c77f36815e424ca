from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalyzeLinkRequest(CamelModel):
    link: Optional[str] = None
    action_set: int = 0
    manual_type: Optional[str] = None
    generate_dynamic_actions: bool = False


class ActionItem(BaseModel):
    title: str
    description: str = ""
    icon: Optional[str] = None


class PromptAction(BaseModel):
    title: str
    description: str = ""
    prompt: str = ""


class AnalyzeLinkResponse(CamelModel):
    type: str
    purpose: str
    title: Optional[str] = None
    actions: List[ActionItem] = Field(default_factory=list)
    total_action_sets: Optional[int] = None
    next_action_set: Optional[int] = None
    is_dynamic: Optional[bool] = None
    content_analysis: Optional[str] = None
    content_available: Optional[bool] = None
    content_message: Optional[str] = None


class AnalyzeUrlRequest(BaseModel):
    url: Optional[str] = None


class GenerateActionsRequest(BaseModel):
    type: Optional[str] = None
    purpose: Optional[str] = None
    content: Optional[str] = None
    url: Optional[str] = None
