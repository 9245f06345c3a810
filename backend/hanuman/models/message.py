"""
Conversation Message Models - role-tagged messages exchanged with the language model.
"""

from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict


Role = Literal["system", "user", "assistant", "tool"]


class Message(BaseModel):
    """
    One entry of a conversation.
    Frozen: once appended to a conversation it never changes.
    """
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    name: Optional[str] = None  # tool name for role="tool", e.g. "webSearch"
    tool_call_id: Optional[str] = None  # required by OpenAI-compatible APIs for role="tool"

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)

    @classmethod
    def tool(cls, name: str, content: str, tool_call_id: Optional[str] = None) -> "Message":
        return cls(role="tool", content=content, name=name, tool_call_id=tool_call_id)

    def to_api_dict(self) -> Dict[str, Any]:
        """Render in the chat/completions wire format, omitting unset optional keys."""
        return self.model_dump(exclude_none=True)


# A conversation is an ordered, append-only list that starts with one system message.
Conversation = List[Message]
