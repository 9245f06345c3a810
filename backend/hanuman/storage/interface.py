"""
Session Store Interface - Abstract base class for conversation caches.
This interface allows swapping the in-process cache for Redis, a database, etc.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Message


class SessionStore(ABC):
    """
    Contract for thread-keyed conversation storage with sliding expiry.
    Operations on different thread ids are independent; each call is atomic per key.
    """

    @abstractmethod
    async def load(self, thread_id: str) -> Optional[List[Message]]:
        """
        Load the conversation cached for a thread.

        Args:
            thread_id: Caller-supplied thread key

        Returns:
            Optional[List[Message]]: The conversation, or None if missing or expired
        """
        pass

    @abstractmethod
    async def save(self, thread_id: str, conversation: List[Message]) -> None:
        """
        Replace the cached conversation and restart its expiry clock.

        Args:
            thread_id: Caller-supplied thread key
            conversation: Full conversation to store
        """
        pass

    @abstractmethod
    async def purge_expired(self) -> int:
        """
        Drop every expired entry.

        Returns:
            int: Number of entries removed
        """
        pass
