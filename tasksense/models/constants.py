"""Constants for tasksense.

This module centralizes the default values used by the enrichment client and the runner.
"""

from tasksense.models.task import Priority


# Completion API defaults
DEFAULT_CLAUDE_API_URL = "https://api.anthropic.com/v1/completions"
DEFAULT_CLAUDE_MODEL = "claude-2"
DEFAULT_MAX_TOKENS_TO_SAMPLE = 150
DEFAULT_TIMEOUT_SEC = 30

# Keyword order matters: the first one found in the completion wins
PRIORITY_KEYWORDS = (Priority.HIGH, Priority.MEDIUM, Priority.LOW)

# Time estimate marker in the completion text
HOURS_MARKER = "hours"

# Server defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

APP_VERSION = "0.1.0"
