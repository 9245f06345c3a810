"""
Error taxonomy for the chat backend.

Provider clients raise CompletionError / RetrievalError. The orchestrator raises
ProtocolViolation / LoopExhausted internally and converts every one of these
into a fallback reply at its boundary.
"""


class HanumanError(Exception):
    """Base class for all chat backend errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class CompletionError(HanumanError):
    """Language model provider unreachable, timed out, or returned an unusable response."""


class RetrievalError(HanumanError):
    """Search provider unreachable, timed out, or returned an unusable response."""


class ProtocolViolation(HanumanError):
    """The model emitted the search directive without a usable query."""


class LoopExhausted(HanumanError):
    """The model kept requesting searches until the loop bound was reached."""

    def __init__(self, rounds: int) -> None:
        self.rounds = rounds
        super().__init__(f"No direct answer after {rounds} completion rounds")
