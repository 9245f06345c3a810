"""Core module - error taxonomy and logging setup."""

from .errors import (
    HanumanError,
    CompletionError,
    RetrievalError,
    ProtocolViolation,
    LoopExhausted,
)

__all__ = [
    'HanumanError',
    'CompletionError',
    'RetrievalError',
    'ProtocolViolation',
    'LoopExhausted',
]
