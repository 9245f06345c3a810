"""
Configuration Settings.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # App info
    app_name: str = "Hanuman Chat"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3001

    # Assistant persona used in the system prompt
    assistant_name: str = "Hanuman"

    # LLM Provider settings
    llm_provider: str = "groq"  # "groq" or "openai"
    llm_api_key: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("llm_api_key", "groq_api_key")
    )
    llm_model: Optional[str] = None  # uses provider default if not set
    llm_base_url: Optional[str] = None  # uses provider default if not set
    llm_temperature: float = 0.0
    llm_max_tokens: int = 1024
    llm_timeout: float = 60.0  # seconds

    # Web search
    web_search_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("web_search_api_key", "tavily_web_api_key"),
    )
    web_search_provider: str = "tavily"
    web_search_max_results: int = 5
    web_search_depth: str = "basic"
    search_timeout: float = 30.0  # seconds

    # Conversation sessions
    session_ttl_seconds: int = 60 * 60 * 24  # 24 hours, sliding from last write
    max_tool_loops: int = 3

    # CORS
    cors_origins: list[str] = [
        "http://127.0.0.1:5500",
        "http://localhost:5500",
    ]

    # Logging configuration
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file_path: str = "./logs/hanuman.log"
    log_file_enabled: bool = False
    log_console_enabled: bool = True
    log_json_format: bool = True  # JSON format for files, human-readable for console
    log_api_requests: bool = True  # Log all API requests/responses


settings = Settings()
