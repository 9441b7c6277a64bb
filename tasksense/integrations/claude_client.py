"""Completion API integration for tasksense.

This module asks a hosted text-completion model for a priority level and a
time estimate for a task title, then scrapes both out of the free-text answer.
The scraping is best-effort: the model's reply has no fixed format, so a
missed or odd field is expected and is not treated as an error.
"""

import logging
from typing import Optional
import requests

from tasksense.config import Settings
from tasksense.models.enrichment import EnrichmentResult
from tasksense.models.constants import PRIORITY_KEYWORDS, HOURS_MARKER

logger = logging.getLogger(__name__)

# Task analysis prompt template
ANALYZE_PROMPT_TEMPLATE = (
    "Analyze the following task and suggest a priority level (High, Medium, Low) "
    "and estimated time to complete (in hours): {title}"
)


class EnrichmentError(Exception):
    """The completion call failed or returned an unusable body."""


def build_prompt(title: str) -> str:
    """Embed the task title verbatim in the analysis prompt."""
    return ANALYZE_PROMPT_TEMPLATE.format(title=title)


def parse_priority(text: str) -> Optional[str]:
    """Return the first keyword of High, Medium, Low found in text.

    Keywords are checked in that fixed order, so "Low, not High" yields High.
    """
    for keyword in PRIORITY_KEYWORDS:
        if keyword.value in text:
            return keyword.value
    return None


def parse_estimated_time(text: str) -> Optional[str]:
    """Return "<token> hours" where token is the last word before the first "hours".

    When "hours" does not occur, the last word of the whole text is used.
    """
    before = text.split(HOURS_MARKER, 1)[0]
    tokens = before.split()
    if not tokens:
        return None
    return f"{tokens[-1]} {HOURS_MARKER}"


def parse_completion(text: str) -> EnrichmentResult:
    """Scrape priority and time estimate out of a completion response."""
    return EnrichmentResult(
        priority=parse_priority(text),
        estimated_time=parse_estimated_time(text),
    )


class ClaudeClient:
    """Client for the hosted completion API."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        """Initialize the client.

        Args:
            settings: Resolved settings; must carry an API key.
            session: Optional requests session (defaults to module-level requests).

        Raises:
            ConfigurationError: If no API key is configured
        """
        self.api_key = settings.require_api_key()
        self.api_url = settings.claude_api_url
        self.model = settings.claude_model
        self.max_tokens = settings.claude_max_tokens
        self.timeout = settings.claude_timeout_sec
        self.http = session or requests

        self.headers = {
            "Content-Type": "application/json",
            "X-API-Key": self.api_key,
        }

    def complete(self, prompt: str) -> str:
        """Send one completion request and return the raw completion text.

        Raises:
            EnrichmentError: On transport errors, non-2xx responses or a malformed body
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "max_tokens_to_sample": self.max_tokens,
        }

        try:
            response = self.http.post(
                self.api_url,
                headers=self.headers,
                json=payload,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = getattr(e.response, "status_code", None)
            # Don't put the response body in the error, it may echo the key
            raise EnrichmentError(f"Completion API returned HTTP {status_code or 'unknown'}") from e
        except requests.RequestException as e:
            raise EnrichmentError(f"Completion API request failed: {type(e).__name__}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise EnrichmentError("Completion API returned a non-JSON body") from e

        completion = body.get("completion") if isinstance(body, dict) else None
        if not isinstance(completion, str):
            raise EnrichmentError("Completion API response has no 'completion' text")

        return completion

    def analyze(self, title: str) -> EnrichmentResult:
        """Ask the model for a priority and time estimate for a task title.

        Returns:
            EnrichmentResult whose fields are None when nothing recognisable was found

        Raises:
            EnrichmentError: If the API call fails
        """
        completion = self.complete(build_prompt(title))
        result = parse_completion(completion)
        logger.debug(
            f"Completion parsed: priority={result.priority} estimated_time={result.estimated_time}"
        )
        return result
