"""Services module - wiring of providers into the chat orchestrator."""

from .chat_service import build_llm_provider, build_search_tool, build_orchestrator

__all__ = ['build_llm_provider', 'build_search_tool', 'build_orchestrator']
