"""Models module."""

from .message import Message, Conversation, Role
from .session import ThreadSession
from .chat import ChatRequest, ChatResponse

__all__ = [
    'Message', 'Conversation', 'Role',
    'ThreadSession',
    'ChatRequest', 'ChatResponse',
]
