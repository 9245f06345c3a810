"""
Reply Directive Parsing - turns raw model output into a typed decision.

The model asks for retrieval by replying with exactly "NEED_SEARCH: <query>".
Parsing yields either a DirectAnswer or a ToolRequest, so a provider with a
structured tool-call API can produce the same variants.
"""

from dataclasses import dataclass
from typing import Union

SEARCH_PREFIX = "NEED_SEARCH:"
WEB_SEARCH_TOOL = "webSearch"


@dataclass(frozen=True)
class DirectAnswer:
    """The model answered the user."""
    text: str


@dataclass(frozen=True)
class ToolRequest:
    """The model asked for a tool; query may be empty (a protocol violation)."""
    name: str
    query: str


ReplyDirective = Union[DirectAnswer, ToolRequest]


def parse_reply(text: str) -> ReplyDirective:
    """
    Classify a raw assistant reply.

    Only a reply that begins with the literal prefix is a search request;
    the query is the remainder with surrounding whitespace removed.
    """
    if not text.startswith(SEARCH_PREFIX):
        return DirectAnswer(text=text)
    return ToolRequest(name=WEB_SEARCH_TOOL, query=text[len(SEARCH_PREFIX):].strip())
