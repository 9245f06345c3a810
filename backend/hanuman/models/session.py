"""
Session Models - cached conversation state for one thread.
"""

from typing import List
from pydantic import BaseModel

from .message import Message


class ThreadSession(BaseModel):
    """Conversation cached for a thread, with its expiry on the store clock."""
    thread_id: str
    conversation: List[Message]
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at
