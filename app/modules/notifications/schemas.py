from pydantic import BaseModel
from typing import Optional, Union


class SendUpdatesRequest(BaseModel):
    message: Optional[str] = None


class SendUpdatesResponse(BaseModel):
    sent: int


class FeedbackRequest(BaseModel):
    email: Optional[str] = None
    message: Optional[str] = None
    rating: Optional[Union[int, str]] = None


class FeedbackResponse(BaseModel):
    success: bool = True
