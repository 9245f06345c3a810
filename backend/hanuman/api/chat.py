"""
Chat API endpoint - one user message in, one finalized assistant reply out.
"""

import logging
from functools import lru_cache
from typing import Any, Optional
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..agents.orchestrator import ChatOrchestrator
from ..config import settings
from ..models import ChatRequest, ChatResponse
from ..services import build_orchestrator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@lru_cache
def get_orchestrator() -> ChatOrchestrator:
    """Process-wide orchestrator; its session store and per-thread locks outlive a request."""
    return build_orchestrator(settings)


async def _read_chat_request(request: Request) -> Optional[ChatRequest]:
    """Parse the body leniently; None when it is absent, not JSON, or not an object."""
    raw = await request.body()
    if not raw:
        return None
    try:
        body: Any = await request.json()
        return ChatRequest.model_validate(body)
    except (ValueError, ValidationError) as e:
        logger.debug(f"Unparseable chat body: {e}")
        return None


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ChatResponse}},
    openapi_extra={"requestBody": {
        "content": {"application/json": {"schema": ChatRequest.model_json_schema(by_alias=True)}},
    }},
)
async def chat(
    request: Request,
    orchestrator: ChatOrchestrator = Depends(get_orchestrator),
):
    """
    Send a chat message and get the assistant reply.

    Args:
        request: Raw request carrying {"message": str, "threadId": str}
        orchestrator: Shared chat orchestrator

    Returns:
        ChatResponse with the reply, or 400 if a field is missing
    """
    chat_request = await _read_chat_request(request)
    if chat_request is None or not chat_request.is_complete():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "All fields are required"},
        )

    reply = await orchestrator.generate(chat_request.message, chat_request.thread_id)
    return ChatResponse(message=reply)
