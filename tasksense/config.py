"""Runtime configuration for tasksense.

Settings come from the process environment. A `.env` file in the working
directory is loaded first, so local development can keep the API key there.
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

from tasksense.models.constants import (
    DEFAULT_CLAUDE_API_URL,
    DEFAULT_CLAUDE_MODEL,
    DEFAULT_MAX_TOKENS_TO_SAMPLE,
    DEFAULT_TIMEOUT_SEC,
    DEFAULT_HOST,
    DEFAULT_PORT,
)

load_dotenv()


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() == "true"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one process."""
    claude_api_key: Optional[str] = None
    claude_api_url: str = DEFAULT_CLAUDE_API_URL
    claude_model: str = DEFAULT_CLAUDE_MODEL
    claude_max_tokens: int = DEFAULT_MAX_TOKENS_TO_SAMPLE
    claude_timeout_sec: int = DEFAULT_TIMEOUT_SEC
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "info"
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            claude_api_key=os.getenv("CLAUDE_API_KEY") or None,
            claude_api_url=os.getenv("CLAUDE_API_URL", DEFAULT_CLAUDE_API_URL),
            claude_model=os.getenv("CLAUDE_MODEL", DEFAULT_CLAUDE_MODEL),
            claude_max_tokens=_env_int("CLAUDE_MAX_TOKENS", DEFAULT_MAX_TOKENS_TO_SAMPLE),
            claude_timeout_sec=_env_int("CLAUDE_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC),
            host=os.getenv("HOST", DEFAULT_HOST),
            port=_env_int("PORT", DEFAULT_PORT),
            log_level=os.getenv("LOG_LEVEL", "info").lower(),
            debug=_env_bool("DEBUG"),
        )

    def require_api_key(self) -> str:
        """Return the completion API key.

        Raises:
            ConfigurationError: If CLAUDE_API_KEY is not set
        """
        if not self.claude_api_key:
            raise ConfigurationError(
                "CLAUDE_API_KEY is not set.\n\n"
                "To save it (choose one):\n"
                "  Option A: Create a .env file in the project root:\n"
                "    echo 'CLAUDE_API_KEY=your_key_here' > .env\n\n"
                "  Option B: Export in your shell:\n"
                "    export CLAUDE_API_KEY=your_key_here\n"
            )
        return self.claude_api_key
