"""Tests for the Slack Web API transport (slack/client.py)."""

import pytest
import requests
from unittest.mock import MagicMock, patch

from build_notifier.slack.client import SlackClient, SlackTransportError
from build_notifier.types import RenderedMessage


def _response(body):
    response = MagicMock()
    response.json.return_value = body
    return response


@pytest.fixture
def message():
    return RenderedMessage(
        text="*FAILURE* :umbrella: <https://cd.example.com/pipelines/1|repo job>",
        attachments=[{"fallback": "", "color": "danger", "title": "#1"}],
    )


class TestPostMessage:
    @patch("build_notifier.slack.client.requests.post")
    def test_posts_once_per_channel_in_order(self, mock_post, message):
        mock_post.return_value = _response({"ok": True})
        client = SlackClient(token="xoxb-token")

        responses = client.post_message(["#a", "#b", "#c"], message)

        assert len(responses) == 3
        assert mock_post.call_count == 3
        channels = [call.kwargs["json"]["channel"] for call in mock_post.call_args_list]
        assert channels == ["#a", "#b", "#c"]

    @patch("build_notifier.slack.client.requests.post")
    def test_request_shape(self, mock_post, message):
        mock_post.return_value = _response({"ok": True})
        client = SlackClient(token="xoxb-token", api_url="https://slack.example.com/api/", timeout=5)

        client.post_message(["#a"], message)

        args, kwargs = mock_post.call_args
        assert args[0] == "https://slack.example.com/api/chat.postMessage"
        assert kwargs["headers"]["Authorization"] == "Bearer xoxb-token"
        assert kwargs["timeout"] == 5
        assert kwargs["json"] == {
            "channel": "#a",
            "text": message.text,
            "attachments": message.attachments,
        }

    @patch("build_notifier.slack.client.requests.post")
    def test_slack_error_raises(self, mock_post, message):
        mock_post.return_value = _response({"ok": False, "error": "channel_not_found"})
        client = SlackClient(token="xoxb-token")

        with pytest.raises(SlackTransportError, match="channel_not_found") as exc_info:
            client.post_message(["#missing"], message)

        assert exc_info.value.channel == "#missing"
        assert exc_info.value.error == "channel_not_found"

    @patch("build_notifier.slack.client.requests.post")
    def test_failure_logged_below_error(self, mock_post, message, caplog):
        mock_post.return_value = _response({"ok": False, "error": "invalid_auth"})
        client = SlackClient(token="xoxb-token")

        with caplog.at_level("DEBUG", logger="build_notifier.slack.client"):
            with pytest.raises(SlackTransportError):
                client.post_message(["#a"], message)

        levels = [record.levelname for record in caplog.records]
        assert "WARNING" in levels
        assert "ERROR" not in levels

    @patch("build_notifier.slack.client.requests.post")
    def test_stops_at_first_failure(self, mock_post, message):
        mock_post.side_effect = [
            _response({"ok": True}),
            _response({"ok": False, "error": "not_in_channel"}),
            _response({"ok": True}),
        ]
        client = SlackClient(token="xoxb-token")

        with pytest.raises(SlackTransportError):
            client.post_message(["#a", "#b", "#c"], message)

        assert mock_post.call_count == 2

    @patch("build_notifier.slack.client.requests.post")
    def test_connection_error_wrapped(self, mock_post, message):
        mock_post.side_effect = requests.ConnectionError("connection refused")
        client = SlackClient(token="xoxb-token")

        with pytest.raises(SlackTransportError, match="connection refused"):
            client.post_message(["#a"], message)

    @patch("build_notifier.slack.client.requests.post")
    def test_http_error_wrapped(self, mock_post, message):
        response = _response({})
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        mock_post.return_value = response
        client = SlackClient(token="xoxb-token")

        with pytest.raises(SlackTransportError, match="500"):
            client.post_message(["#a"], message)

    @patch("build_notifier.slack.client.requests.post")
    def test_no_channels_sends_nothing(self, mock_post, message):
        assert SlackClient(token="xoxb-token").post_message([], message) == []
        mock_post.assert_not_called()
