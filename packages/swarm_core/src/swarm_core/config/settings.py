"""Pydantic models for application settings."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel

PLACEHOLDER_API_KEY = "your_groq_api_key_here"
DEFAULT_GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"
DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"


class Settings(BaseModel, frozen=True):
    """Runtime configuration loaded from environment variables."""

    groq_api_key: str | None = None
    groq_model: str = DEFAULT_GROQ_MODEL
    groq_api_url: str = DEFAULT_GROQ_API_URL
    model_timeout: float = 60.0
    tool_timeout: float = 15.0
    # Task executor completion defaults (role independent)
    executor_temperature: float = 0.7
    executor_max_tokens: int = 1000
    # Command parser completion defaults
    command_temperature: float = 0.1
    command_max_tokens: int = 150
    # Coordinator completion defaults
    coordinator_temperature: float = 0.3
    coordinator_max_tokens: int = 500
    coordinator_timeout: float = 120.0
    recent_message_window: int = 5
    # Tool adapter limits
    duckduckgo_max_results: int = 10
    duckduckgo_source_limit: int = 3
    wikipedia_search_limit: int = 3

    @property
    def model_configured(self) -> bool:
        """Whether a usable model credential is present."""
        return bool(self.groq_api_key)


def _normalize_api_key(value: str | None) -> str | None:
    """Treat unset, blank and placeholder keys as missing."""
    if value is None:
        return None
    stripped = value.strip()
    if not stripped or stripped == PLACEHOLDER_API_KEY:
        return None
    return stripped


def load_settings() -> Settings:
    """Load settings from environment variables with defaults."""
    load_dotenv()

    return Settings(
        groq_api_key=_normalize_api_key(os.getenv("GROQ_API_KEY")),
        groq_model=os.getenv("GROQ_MODEL", DEFAULT_GROQ_MODEL),
        groq_api_url=os.getenv("GROQ_API_URL", DEFAULT_GROQ_API_URL),
        model_timeout=float(os.getenv("MODEL_TIMEOUT", "60")),
        tool_timeout=float(os.getenv("TOOL_TIMEOUT", "15")),
        executor_temperature=float(os.getenv("EXECUTOR_TEMPERATURE", "0.7")),
        executor_max_tokens=int(os.getenv("EXECUTOR_MAX_TOKENS", "1000")),
        command_temperature=float(os.getenv("COMMAND_TEMPERATURE", "0.1")),
        command_max_tokens=int(os.getenv("COMMAND_MAX_TOKENS", "150")),
        coordinator_temperature=float(os.getenv("COORDINATOR_TEMPERATURE", "0.3")),
        coordinator_max_tokens=int(os.getenv("COORDINATOR_MAX_TOKENS", "500")),
        coordinator_timeout=float(os.getenv("COORDINATOR_TIMEOUT", "120")),
        recent_message_window=int(os.getenv("RECENT_MESSAGE_WINDOW", "5")),
        duckduckgo_max_results=int(os.getenv("DUCKDUCKGO_MAX_RESULTS", "10")),
        duckduckgo_source_limit=int(os.getenv("DUCKDUCKGO_SOURCE_LIMIT", "3")),
        wikipedia_search_limit=int(os.getenv("WIKIPEDIA_SEARCH_LIMIT", "3")),
    )
