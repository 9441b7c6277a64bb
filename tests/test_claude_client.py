"""Tests for the completion API client and its response scraping."""

import pytest
import requests
from unittest.mock import MagicMock, patch

from tasksense.config import ConfigurationError, Settings
from tasksense.integrations.claude_client import (
    ClaudeClient,
    EnrichmentError,
    build_prompt,
    parse_completion,
    parse_estimated_time,
    parse_priority,
)
from tasksense.models.task import Priority


def _mock_response(json_body=None, status_code=200, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        http_error = requests.HTTPError(f"{status_code} Error")
        http_error.response = response
        response.raise_for_status.side_effect = http_error
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_body
    return response


class TestBuildPrompt:

    def test_prompt_embeds_title_verbatim(self):
        prompt = build_prompt("Refactor the 'billing' module {now}")
        assert prompt.endswith(": Refactor the 'billing' module {now}")
        assert "(High, Medium, Low)" in prompt
        assert "in hours" in prompt


class TestParseCompletion:
    """Test best-effort scraping of the completion text."""

    def test_medium_priority_and_hours(self):
        result = parse_completion("This task is Medium priority, about 3 hours")
        assert result.priority == Priority.MEDIUM
        assert result.estimated_time == "3 hours"

    def test_no_keyword_leaves_priority_empty(self):
        assert parse_priority("Nothing to see here, 2 hours") is None

    def test_keyword_order_beats_text_position(self):
        """High is checked first, even if Low appears earlier in the text."""
        assert parse_priority("Low effort but High priority") == "High"
        assert parse_priority("Low or Medium") == "Medium"

    def test_keyword_match_is_case_sensitive(self):
        assert parse_priority("high priority") is None

    def test_time_uses_first_hours_occurrence(self):
        assert parse_estimated_time("Roughly 4-6 hours, maybe 8 hours") == "4-6 hours"

    def test_time_token_adjacent_to_hours(self):
        assert parse_estimated_time("Priority: High. Time: 2hours") == "2 hours"

    def test_time_without_hours_marker_uses_last_token(self):
        assert parse_estimated_time("Priority: Low") == "Low hours"

    def test_time_with_nothing_before_hours(self):
        assert parse_estimated_time("hours are hard to say") is None

    def test_empty_completion(self):
        result = parse_completion("")
        assert result.priority is None
        assert result.estimated_time is None
        assert result.is_empty()


class TestClaudeClient:
    """Test the HTTP side of the client."""

    def test_missing_api_key_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            ClaudeClient(Settings(claude_api_key=None))

    def test_analyze_posts_completion_request(self, test_settings):
        response = _mock_response({"completion": " I'd rate this High priority, about 2 hours."})

        with patch("tasksense.integrations.claude_client.requests.post", return_value=response) as post:
            result = ClaudeClient(test_settings).analyze("Fix production outage")

        assert result.priority == Priority.HIGH
        assert result.estimated_time == "2 hours"

        post.assert_called_once()
        args, kwargs = post.call_args
        assert args[0] == test_settings.claude_api_url
        assert kwargs["headers"]["X-API-Key"] == "test-api-key"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["json"] == {
            "model": "claude-2",
            "prompt": build_prompt("Fix production outage"),
            "max_tokens_to_sample": 150,
        }
        assert kwargs["timeout"] == test_settings.claude_timeout_sec

    def test_uses_injected_session(self, test_settings):
        session = MagicMock()
        session.post.return_value = _mock_response({"completion": "Low, 1 hours"})

        result = ClaudeClient(test_settings, session=session).analyze("Water plants")

        session.post.assert_called_once()
        assert result.priority == Priority.LOW
        assert result.estimated_time == "1 hours"

    def test_transport_failure_raises_enrichment_error(self, test_settings):
        with patch(
            "tasksense.integrations.claude_client.requests.post",
            side_effect=requests.ConnectionError("connection refused"),
        ):
            with pytest.raises(EnrichmentError):
                ClaudeClient(test_settings).analyze("Buy milk")

    def test_timeout_raises_enrichment_error(self, test_settings):
        with patch(
            "tasksense.integrations.claude_client.requests.post",
            side_effect=requests.Timeout(),
        ):
            with pytest.raises(EnrichmentError):
                ClaudeClient(test_settings).analyze("Buy milk")

    def test_auth_failure_raises_enrichment_error(self, test_settings):
        response = _mock_response({"error": {"type": "authentication_error"}}, status_code=401)

        with patch("tasksense.integrations.claude_client.requests.post", return_value=response):
            with pytest.raises(EnrichmentError) as exc_info:
                ClaudeClient(test_settings).analyze("Buy milk")

        assert "401" in str(exc_info.value)
        assert "test-api-key" not in str(exc_info.value)

    def test_non_json_body_raises_enrichment_error(self, test_settings):
        response = _mock_response(json_error=ValueError("Expecting value"))

        with patch("tasksense.integrations.claude_client.requests.post", return_value=response):
            with pytest.raises(EnrichmentError):
                ClaudeClient(test_settings).analyze("Buy milk")

    @pytest.mark.parametrize("body", [{}, {"completion": None}, {"completion": 42}, ["High"]])
    def test_missing_completion_field_raises_enrichment_error(self, test_settings, body):
        response = _mock_response(body)

        with patch("tasksense.integrations.claude_client.requests.post", return_value=response):
            with pytest.raises(EnrichmentError):
                ClaudeClient(test_settings).analyze("Buy milk")
