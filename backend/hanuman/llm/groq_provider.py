"""
Groq LLM Provider.
Groq serves an OpenAI-compatible chat/completions endpoint.
"""

from .openai_provider import OpenAICompatibleProvider


class GroqProvider(OpenAICompatibleProvider):
    """Provider for Groq-hosted models (Llama by default)."""

    provider_name = "groq"

    def __init__(
        self,
        api_key: str,
        model: str = "llama-3.3-70b-versatile",
        base_url: str = "https://api.groq.com/openai/v1",
        default_temperature: float = 0.0,
        default_max_tokens: int = 1024,
        timeout: float = 60.0,
    ):
        super().__init__(api_key, model, base_url, default_temperature, default_max_tokens, timeout)
