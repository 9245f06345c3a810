"""
Chat API Models - request and response bodies for POST /chat.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """
    Inbound chat message.
    Both fields are optional at the schema level so the route can answer
    missing values with its own 400 body instead of a validation error.
    """
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    thread_id: Optional[str] = Field(default=None, alias="threadId")

    def is_complete(self) -> bool:
        return bool(self.message) and bool(self.thread_id)


class ChatResponse(BaseModel):
    """Final assistant reply (an answer or a fallback)."""
    message: str
