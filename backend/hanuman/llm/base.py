"""
LLM Provider Base - Abstract base for all chat completion providers.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field

from ..models import Message


@dataclass
class LLMResponse:
    """Response from an LLM API call."""
    content: str
    model: str = ""
    usage: Dict[str, int] = field(default_factory=dict)
    raw: Optional[Dict[str, Any]] = None

    def to_message(self) -> Message:
        """The generated reply as an assistant message."""
        return Message.assistant(self.content)


class LLMProvider(ABC):
    """
    Abstract base class for LLM API providers.
    Implementations raise CompletionError on any provider failure and never retry.
    """

    def __init__(self, api_key: str, model: str, base_url: Optional[str] = None,
                 default_temperature: float = 0.0, default_max_tokens: int = 1024):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.default_temperature = default_temperature
        self.default_max_tokens = default_max_tokens

    @abstractmethod
    async def chat_completion(
        self,
        messages: List[Message],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        **kwargs
    ) -> LLMResponse:
        """
        Send a chat completion request.

        Args:
            messages: Ordered conversation, system message first
            temperature: Sampling temperature override
            max_tokens: Max tokens override
            **kwargs: Additional provider-specific parameters

        Returns:
            LLMResponse with the generated content

        Raises:
            CompletionError: provider unreachable, timed out, or malformed response
        """
        pass

    def _format_messages(self, messages: List[Message]) -> List[Dict[str, Any]]:
        """Convert Message list to API-compatible format."""
        return [m.to_api_dict() for m in messages]
