"""
In-process Session Store with sliding TTL.
Entries live in a dict guarded by a lock; expired entries are treated as absent
and dropped lazily on access or by purge_expired().
"""

import logging
import threading
import time
from typing import Callable, Dict, List, Optional

from ..models import Message, ThreadSession
from .interface import SessionStore

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60 * 60 * 24


class InMemorySessionStore(SessionStore):
    """
    Process-local conversation cache.
    Copy-on-write: save() stores a copy and load() hands out a copy, so callers
    never share a list with the cache.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            ttl_seconds: Lifetime of an entry after its last save
            clock: Monotonic time source in seconds (injectable for tests)
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._sessions: Dict[str, ThreadSession] = {}
        self._lock = threading.Lock()

    async def load(self, thread_id: str) -> Optional[List[Message]]:
        now = self._clock()
        with self._lock:
            session = self._sessions.get(thread_id)
            if session is None:
                return None
            if session.is_expired(now):
                del self._sessions[thread_id]
                logger.debug(f"Session expired: thread={thread_id}")
                return None
            conversation = list(session.conversation)

        logger.debug(f"Session loaded: thread={thread_id}, messages={len(conversation)}")
        return conversation

    async def save(self, thread_id: str, conversation: List[Message]) -> None:
        session = ThreadSession(
            thread_id=thread_id,
            conversation=list(conversation),
            expires_at=self._clock() + self.ttl_seconds,
        )
        with self._lock:
            self._sessions[thread_id] = session

        logger.debug(f"Session saved: thread={thread_id}, messages={len(conversation)}")

    async def purge_expired(self) -> int:
        now = self._clock()
        with self._lock:
            expired = [tid for tid, s in self._sessions.items() if s.is_expired(now)]
            for tid in expired:
                del self._sessions[tid]

        if expired:
            logger.info(f"Purged {len(expired)} expired sessions")
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
