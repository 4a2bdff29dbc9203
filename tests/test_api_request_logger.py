"""Tests for API request logger."""

import json
from unittest.mock import MagicMock, patch

import pytest

from mcflurry_ratings.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given MCR_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("MCR_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    @pytest.mark.parametrize("value", ["true", "True", "TRUE"])
    def test_when_env_set_to_true_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Given MCR_LOG_REQUESTS=true in any case, when checking, then returns True."""
        monkeypatch.setenv("MCR_LOG_REQUESTS", value)

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given MCR_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("MCR_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("mcflurry_ratings.adapters.api_request_logger.should_log_requests")
    @patch("mcflurry_ratings.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://example.com/rest/v1/ratings")

        mock_logger.info.assert_not_called()

    @patch("mcflurry_ratings.adapters.api_request_logger.should_log_requests")
    @patch("mcflurry_ratings.adapters.api_request_logger.logger")
    def test_when_logging_enabled_then_logs_method_and_url_with_params(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given logging enabled, when calling with params, then logs them in the URL."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://example.com/rest/v1/ratings",
            params={"select": "*", "order": "created_at.desc"},
        )

        mock_logger.info.assert_called_once()
        message = mock_logger.info.call_args[0][0]
        assert "API Request:" in message
        assert (
            "GET https://example.com/rest/v1/ratings?order=created_at.desc&select=*" in message
        )

    @patch("mcflurry_ratings.adapters.api_request_logger.should_log_requests")
    @patch("mcflurry_ratings.adapters.api_request_logger.logger")
    def test_when_logging_headers_then_credentials_are_redacted(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given credential headers, when logging, then their values never appear."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://example.com",
            headers={"apikey": "secret", "Authorization": "Bearer secret", "Accept": "json"},
        )

        message = mock_logger.info.call_args[0][0]
        assert "secret" not in message
        assert "***REDACTED***" in message
        assert '"Accept": "json"' in message

    @patch("mcflurry_ratings.adapters.api_request_logger.should_log_requests")
    @patch("mcflurry_ratings.adapters.api_request_logger.logger")
    def test_when_logging_payload_then_payload_is_json(
        self, mock_logger: MagicMock, mock_should_log: MagicMock
    ) -> None:
        """Given a payload, when logging, then it is included as JSON."""
        mock_should_log.return_value = True
        payload = [{"restaurant_id": 3, "comment": "Schön"}]

        log_api_request("POST", "https://example.com", payload=payload)

        message = mock_logger.info.call_args[0][0]
        payload_text = message.split("Payload: ", 1)[1]
        assert json.loads(payload_text) == payload
