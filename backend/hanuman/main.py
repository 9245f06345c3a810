"""
Hanuman Chat - Main FastAPI Application
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager

from .config import settings
from .api import chat_router
from .core.logging_config import setup_logging
from .middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    setup_logging(settings)

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(
        f"LLM provider: {settings.llm_provider} "
        f"(configured={bool(settings.llm_api_key)}), "
        f"web search: {settings.web_search_provider} "
        f"(configured={bool(settings.web_search_api_key)})"
    )
    logger.info(
        f"Session TTL: {settings.session_ttl_seconds}s, max tool loops: {settings.max_tool_loops}"
    )
    yield
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Chat assistant backend with on-demand web search",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

if settings.log_api_requests:
    app.add_middleware(RequestLoggingMiddleware)

app.include_router(chat_router)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Root endpoint."""
    return "Welcome to chatbot ai."


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


def run() -> None:
    """Serve the app with uvicorn."""
    import uvicorn
    uvicorn.run(
        "hanuman.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )


if __name__ == "__main__":
    run()
