"""Runtime configuration.

Hides where settings come from (environment, .env file, CLI overrides)
from the rest of the application.
"""

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 100
DEFAULT_CHAR_LIMIT = 280


class CompletionMode(str, Enum):
    """How the session waits for the completion API."""

    BLOCKING = "blocking"  # Request runs inside the key handler
    BACKGROUND = "background"  # Request runs in a worker, result posted back


def _first_env(*names: str) -> str | None:
    """Return the first non-empty environment variable among names."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


def parse_max_tokens(raw: str | None, default: int = DEFAULT_MAX_TOKENS) -> int:
    """Parse a token ceiling, falling back to default on any bad value.

    Missing, non-integer, and non-positive values are all treated as absent.
    """
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


class Settings(BaseModel):
    """Resolved settings for a chat session."""

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, description="Completion API key; None enables offline mode")
    model: str = Field(default=DEFAULT_MODEL, description="Chat model identifier")
    max_tokens: int = Field(default=DEFAULT_MAX_TOKENS, ge=1, description="Token ceiling per completion")
    base_url: str | None = Field(default=None, description="Optional custom API base URL")
    char_limit: int = Field(default=DEFAULT_CHAR_LIMIT, ge=1, description="Input buffer character limit")
    completion_mode: CompletionMode = Field(default=CompletionMode.BLOCKING)
    review_art: bool = Field(default=True, description="Open the art review screen when art arrives")
    log_level: str | None = Field(default=None, description="Debug panel level, None hides the panel")

    @property
    def offline(self) -> bool:
        """True when no API key is configured."""
        return not self.api_key

    @classmethod
    def from_env(cls, load_dotenv_file: bool = True, **overrides: object) -> "Settings":
        """Build settings from environment variables.

        Environment variables:
            OPENAI_API_KEY / API_KEY: API key (absent: offline placeholder mode)
            OPENAI_MAX_TOKENS / MAX_TOKENS: Token ceiling (default: 100)
            OPENAI_CHAT_MODEL: Model (default: gpt-4o-mini)
            OPENAI_BASE_URL: Custom API endpoint

        Args:
            load_dotenv_file: Also read a .env file from the working directory
            **overrides: Field values that win over the environment; None values are ignored
        """
        if load_dotenv_file:
            load_dotenv()

        values: dict[str, object] = {
            "api_key": _first_env("OPENAI_API_KEY", "API_KEY"),
            "model": os.getenv("OPENAI_CHAT_MODEL") or DEFAULT_MODEL,
            "max_tokens": parse_max_tokens(_first_env("OPENAI_MAX_TOKENS", "MAX_TOKENS")),
            "base_url": os.getenv("OPENAI_BASE_URL") or None,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
