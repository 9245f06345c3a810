"""Agents module - conversational orchestration with on-demand web search."""

from .directive import DirectAnswer, ToolRequest, ReplyDirective, parse_reply
from .orchestrator import ChatOrchestrator, TurnOutcome, TurnResult, FALLBACK_REPLIES

__all__ = [
    'DirectAnswer',
    'ToolRequest',
    'ReplyDirective',
    'parse_reply',
    'ChatOrchestrator',
    'TurnOutcome',
    'TurnResult',
    'FALLBACK_REPLIES',
]
