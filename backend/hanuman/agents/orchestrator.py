"""
Chat Orchestrator - Runs one conversational turn with on-demand web search.

Per turn: restore (or start) the thread's conversation, append the user message,
then alternate completion and search calls until the model answers directly,
a failure forces a fallback reply, or the loop bound is reached. Every terminal
state saves the conversation before the reply is returned.
"""

import asyncio
import logging
import time
import weakref
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, List, Optional

from ..config import settings
from ..core.errors import CompletionError, LoopExhausted, ProtocolViolation, RetrievalError
from ..core.logging_config import ThreadLoggerAdapter
from ..llm.base import LLMProvider, LLMResponse
from ..models import Message
from ..storage import SessionStore
from ..tools.web_search import WebSearchTool, encode_snippets
from .directive import DirectAnswer, SEARCH_PREFIX, parse_reply

logger = logging.getLogger(__name__)


class TurnOutcome(str, Enum):
    """Terminal state of a turn."""
    DIRECT_ANSWER = "direct_answer"
    EMPTY_QUERY_FALLBACK = "empty_query_fallback"
    RETRIEVAL_FAILED_FALLBACK = "retrieval_failed_fallback"
    LOOP_EXHAUSTED_FALLBACK = "loop_exhausted_fallback"
    COMPLETION_FAILED_FALLBACK = "completion_failed_fallback"


FALLBACK_REPLIES = {
    TurnOutcome.EMPTY_QUERY_FALLBACK:
        "Sorry, I couldn't understand what to search for. Please rephrase your question.",
    TurnOutcome.RETRIEVAL_FAILED_FALLBACK:
        "I'm having trouble fetching live info right now.",
    TurnOutcome.LOOP_EXHAUSTED_FALLBACK:
        "Sorry, I couldn't find a definitive answer right now. Please try asking again.",
    TurnOutcome.COMPLETION_FAILED_FALLBACK:
        "Sorry, something went wrong while generating a reply. Please try again.",
}


@dataclass
class TurnResult:
    """Reply text plus how the turn ended."""
    reply: str
    outcome: TurnOutcome
    completion_calls: int = 0
    search_calls: int = 0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ChatOrchestrator:
    """
    Coordinates the session store, the completion provider and the search tool.
    Turns for the same thread are serialized; different threads run concurrently.
    """

    def __init__(
        self,
        session_store: SessionStore,
        llm_provider: Optional[LLMProvider] = None,
        search_tool: Optional[WebSearchTool] = None,
        max_tool_loops: int = settings.max_tool_loops,
        temperature: float = 0.0,
        assistant_name: str = "Hanuman",
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Initialize orchestrator.

        Args:
            session_store: Conversation cache keyed by thread id
            llm_provider: Completion provider; None makes every turn a completion fallback
            search_tool: Retrieval client; None makes every search a retrieval fallback
            max_tool_loops: Maximum completion calls per turn
            temperature: Sampling temperature sent on every completion call
            assistant_name: Persona named in the system prompt
            clock: UTC time source for the system prompt timestamp
        """
        if max_tool_loops < 1:
            raise ValueError("max_tool_loops must be at least 1")
        self.session_store = session_store
        self.llm_provider = llm_provider
        self.search_tool = search_tool
        self.max_tool_loops = max_tool_loops
        self.temperature = temperature
        self.assistant_name = assistant_name
        self._clock = clock
        self._thread_locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def build_system_message(self) -> Message:
        """System instructions, stamped with the current UTC time."""
        now = self._clock().strftime("%a, %d %b %Y %H:%M:%S GMT")
        return Message.system(
            f"You are {self.assistant_name}, a helpful and polite AI assistant.\n"
            "\n"
            "Rules:\n"
            "- If the user asks for real-time, uncertain or external information,\n"
            f"  respond ONLY with: {SEARCH_PREFIX} <best query>\n"
            "  and nothing else.\n"
            f"- NEVER ask the user to type {SEARCH_PREFIX.rstrip(':')}.\n"
            "- After receiving tool results, summarize them clearly.\n"
            f"- Never mention {SEARCH_PREFIX.rstrip(':')} or tools to the user.\n"
            "- Otherwise answer normally.\n"
            f"Current UTC: {now}"
        )

    async def generate(self, user_message: str, thread_id: str) -> str:
        """
        Produce the final reply for a user message on a thread.

        Never raises for provider failures: those become fallback replies.
        """
        result = await self.run_turn(user_message, thread_id)
        return result.reply

    async def run_turn(self, user_message: str, thread_id: str) -> TurnResult:
        """Run one turn and report its outcome alongside the reply."""
        log = ThreadLoggerAdapter(logger, {"thread_id": thread_id})

        async with self._lock_for(thread_id):
            conversation = await self.session_store.load(thread_id)
            if conversation is None:
                conversation = [self.build_system_message()]
                log.info("Starting new conversation")

            conversation.append(Message.user(user_message))
            log.info(f"Processing message: {user_message[:100]}")

            result = TurnResult(reply="", outcome=TurnOutcome.DIRECT_ANSWER)
            try:
                result.reply = await self._run_protocol(conversation, result, log)
            except ProtocolViolation as e:
                log.warning(f"Protocol violation: {e.message}")
                result.outcome = TurnOutcome.EMPTY_QUERY_FALLBACK
            except RetrievalError as e:
                log.warning(f"Retrieval failed: {e.message}")
                result.outcome = TurnOutcome.RETRIEVAL_FAILED_FALLBACK
            except LoopExhausted as e:
                log.warning(e.message)
                result.outcome = TurnOutcome.LOOP_EXHAUSTED_FALLBACK
            except CompletionError as e:
                log.error(f"Completion failed: {e.message}")
                result.outcome = TurnOutcome.COMPLETION_FAILED_FALLBACK

            if result.outcome is not TurnOutcome.DIRECT_ANSWER:
                result.reply = FALLBACK_REPLIES[result.outcome]
                conversation.append(Message.assistant(result.reply))

            await self.session_store.save(thread_id, conversation)

        log.info(
            f"Turn completed: outcome={result.outcome.value}, "
            f"completions={result.completion_calls}, searches={result.search_calls}, "
            f"history={len(conversation)} messages",
            extra={"extra_fields": {"outcome": result.outcome.value}}
        )
        return result

    async def _run_protocol(
        self,
        conversation: List[Message],
        result: TurnResult,
        log: logging.LoggerAdapter,
    ) -> str:
        """Alternate completion and search calls; mutates conversation in place."""
        for round_no in range(1, self.max_tool_loops + 1):
            response = await self._complete(conversation)
            result.completion_calls += 1
            conversation.append(response.to_message())

            directive = parse_reply(response.content)
            if isinstance(directive, DirectAnswer):
                return directive.text

            if not directive.query:
                raise ProtocolViolation("Search directive carried no query")

            log.info(f"Model requested search (round {round_no}): {directive.query}")
            snippets = await self._search(directive.query)
            result.search_calls += 1
            conversation.append(Message.tool(
                name=directive.name,
                content=encode_snippets(snippets),
                tool_call_id=f"{directive.name}_{int(time.time() * 1000)}",
            ))

        raise LoopExhausted(self.max_tool_loops)

    async def _complete(self, conversation: List[Message]) -> LLMResponse:
        if self.llm_provider is None:
            raise CompletionError("LLM provider not configured (set LLM_API_KEY)")
        return await self.llm_provider.chat_completion(
            conversation, temperature=self.temperature
        )

    async def _search(self, query: str) -> List[str]:
        if self.search_tool is None:
            raise RetrievalError("Web search not configured (set WEB_SEARCH_API_KEY)")
        return await self.search_tool.search(query)

    def _lock_for(self, thread_id: str) -> asyncio.Lock:
        lock = self._thread_locks.get(thread_id)
        if lock is None:
            lock = asyncio.Lock()
            self._thread_locks[thread_id] = lock
        return lock
