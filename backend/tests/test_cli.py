"""
Unit tests for the console chat loop.
"""

import io
import pytest
from unittest.mock import AsyncMock

from hanuman.agents.orchestrator import ChatOrchestrator
from hanuman.cli import chat_loop


def _reader(lines):
    it = iter(lines)

    def read_line(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read_line


class TestChatLoop:
    """Tests for chat_loop."""

    @pytest.mark.asyncio
    async def test_replies_until_bye(self):
        orchestrator = AsyncMock(spec=ChatOrchestrator)
        orchestrator.generate.return_value = "Hi!"
        out = io.StringIO()

        await chat_loop(orchestrator, "t", read_line=_reader(["hello", "  BYE ", "never read"]), out=out)

        orchestrator.generate.assert_awaited_once_with("hello", "t")
        lines = out.getvalue().splitlines()
        assert lines[0] == "Assistant: Hi!"
        assert lines[1].startswith("Assistant: Bye!")

    @pytest.mark.asyncio
    async def test_blank_lines_skipped_and_eof_ends(self):
        orchestrator = AsyncMock(spec=ChatOrchestrator)
        orchestrator.generate.return_value = "ok"
        out = io.StringIO()

        await chat_loop(orchestrator, "t", read_line=_reader(["", "   ", "q"]), out=out)

        orchestrator.generate.assert_awaited_once_with("q", "t")
        assert out.getvalue() == "Assistant: ok\n"
