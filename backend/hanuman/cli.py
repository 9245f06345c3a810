"""
Console chat - talk to the assistant from a terminal, or serve the HTTP API.
"""

import argparse
import asyncio
import sys
import uuid
from typing import Callable, Optional, TextIO

from .agents.orchestrator import ChatOrchestrator
from .config import settings
from .core.logging_config import setup_logging
from .services import build_orchestrator

EXIT_WORD = "bye"
FAREWELL = "Bye! Have a great day"


async def chat_loop(
    orchestrator: ChatOrchestrator,
    thread_id: str,
    read_line: Callable[[str], str] = input,
    out: TextIO = sys.stdout,
) -> None:
    """
    Read questions until the user types the exit word or closes stdin.
    Blank lines are ignored.
    """
    while True:
        try:
            question = await asyncio.to_thread(read_line, "You: ")
        except EOFError:
            break

        if question.strip().lower() == EXIT_WORD:
            print(f"Assistant: {FAREWELL}", file=out)
            break
        if not question.strip():
            continue

        reply = await orchestrator.generate(question, thread_id)
        print(f"Assistant: {reply}", file=out)


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description="Chat with the assistant.")
    subparsers = parser.add_subparsers(dest="command")

    chat_parser = subparsers.add_parser("chat", help="Interactive console chat (default)")
    chat_parser.add_argument(
        "--thread-id",
        default=None,
        help="Conversation thread key (default: a new random id)",
    )

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.host)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)

    if args.command == "serve":
        import uvicorn
        uvicorn.run("hanuman.main:app", host=args.host, port=args.port, reload=args.reload)
        return

    setup_logging(settings)
    orchestrator = build_orchestrator(settings)
    thread_id = getattr(args, "thread_id", None) or uuid.uuid4().hex
    try:
        asyncio.run(chat_loop(orchestrator, thread_id))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
