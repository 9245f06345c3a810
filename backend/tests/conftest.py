"""
Shared test fixtures and configuration.
"""

import pytest
import os
from typing import Callable, List
from unittest.mock import AsyncMock

# Set test environment variables before importing app modules
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_API_REQUESTS", "false")

from hanuman.llm.base import LLMProvider, LLMResponse  # noqa: E402
from hanuman.storage import InMemorySessionStore  # noqa: E402
from hanuman.tools.web_search import WebSearchTool  # noqa: E402


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return InMemorySessionStore(ttl_seconds=60, clock=clock)


@pytest.fixture
def make_llm() -> Callable[..., AsyncMock]:
    """Build a mocked provider that returns the given reply texts in order."""
    def _make(*replies: str) -> AsyncMock:
        provider = AsyncMock(spec=LLMProvider)
        provider.chat_completion.side_effect = [
            LLMResponse(content=text, model="test-model") for text in replies
        ]
        return provider
    return _make


@pytest.fixture
def make_search() -> Callable[..., AsyncMock]:
    """Build a mocked search tool returning the given snippets."""
    def _make(snippets: List[str] = None) -> AsyncMock:
        tool = AsyncMock(spec=WebSearchTool)
        tool.search.return_value = list(snippets or [])
        return tool
    return _make
