"""
Chat service wiring - builds an orchestrator from settings.
Shared by the HTTP API and the console chat.
"""

import logging
from typing import Any, Optional

from ..agents.orchestrator import ChatOrchestrator
from ..llm.base import LLMProvider
from ..llm.factory import create_llm_provider
from ..storage import InMemorySessionStore, SessionStore
from ..tools.web_search import WebSearchTool

logger = logging.getLogger(__name__)


def build_llm_provider(config: Any) -> Optional[LLMProvider]:
    """Get configured LLM provider or None."""
    return create_llm_provider(
        provider=config.llm_provider,
        api_key=config.llm_api_key,
        model=config.llm_model,
        base_url=config.llm_base_url,
        timeout=config.llm_timeout,
        default_max_tokens=config.llm_max_tokens,
    )


def build_search_tool(config: Any) -> Optional[WebSearchTool]:
    """Get configured web search tool or None."""
    if not config.web_search_api_key:
        return None
    return WebSearchTool(
        api_key=config.web_search_api_key,
        provider=config.web_search_provider,
        max_results=config.web_search_max_results,
        search_depth=config.web_search_depth,
        timeout=config.search_timeout,
    )


def build_orchestrator(config: Any, session_store: Optional[SessionStore] = None) -> ChatOrchestrator:
    """
    Assemble a ChatOrchestrator from a Settings-like object.

    Args:
        config: Settings instance
        session_store: Store to use; a fresh in-memory store when omitted

    Returns:
        ChatOrchestrator ready to serve turns
    """
    if session_store is None:
        session_store = InMemorySessionStore(ttl_seconds=config.session_ttl_seconds)

    llm_provider = build_llm_provider(config)
    if llm_provider is None:
        logger.warning("LLM_API_KEY is not set; every chat turn will return a fallback reply")
    search_tool = build_search_tool(config)
    if search_tool is None:
        logger.warning("WEB_SEARCH_API_KEY is not set; search requests will return a fallback reply")

    return ChatOrchestrator(
        session_store=session_store,
        llm_provider=llm_provider,
        search_tool=search_tool,
        max_tool_loops=config.max_tool_loops,
        temperature=config.llm_temperature,
        assistant_name=config.assistant_name,
    )
