"""Storage module - conversation session stores."""

from .interface import SessionStore
from .memory_store import InMemorySessionStore

__all__ = ['SessionStore', 'InMemorySessionStore']
