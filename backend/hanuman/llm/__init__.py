"""LLM module - provides unified interface for chat completion providers."""

from .base import LLMProvider, LLMResponse
from .openai_provider import OpenAICompatibleProvider, OpenAIProvider
from .groq_provider import GroqProvider
from .factory import create_llm_provider

__all__ = [
    'LLMProvider',
    'LLMResponse',
    'OpenAICompatibleProvider',
    'OpenAIProvider',
    'GroqProvider',
    'create_llm_provider',
]
