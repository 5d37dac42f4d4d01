"""
Slack Web API Client

Posts rendered build notifications to Slack channels with a bot token.
"""

import logging
from typing import Any, Dict, List, Sequence

import requests

from ..config import DEFAULT_SLACK_API_URL
from ..types import RenderedMessage

logger = logging.getLogger(__name__)


class SlackTransportError(Exception):
    """Raised when Slack rejects or fails to deliver a message."""

    def __init__(self, channel: str, error: str):
        super().__init__(f"Failed to post to {channel}: {error}")
        self.channel = channel
        self.error = error


class SlackClient:
    """
    Minimal Slack Web API client.

    Usage:
        client = SlackClient(token="xoxb-...")
        client.post_message(["#builds", "#team"], message)
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_SLACK_API_URL,
        timeout: int = 10,
    ):
        self._token = token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json; charset=utf-8",
        }

    def _post(self, channel: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Send one chat.postMessage request.

        Raises:
            SlackTransportError: On connection errors, HTTP errors or an
                `ok: false` reply
        """
        try:
            response = requests.post(
                f"{self.api_url}/chat.postMessage",
                json=payload,
                headers=self._headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as e:
            raise SlackTransportError(channel, str(e)) from e
        except ValueError as e:
            raise SlackTransportError(channel, f"invalid response body: {e}") from e

        if not body.get("ok"):
            raise SlackTransportError(channel, body.get("error", "unknown_error"))

        return body

    def post_message(
        self,
        channels: Sequence[str],
        message: RenderedMessage,
    ) -> List[Dict[str, Any]]:
        """
        Post a message to every channel, in order.

        Slack accepts a single channel per request, so this sends one request
        per channel and stops at the first failure.

        Args:
            channels: Channel names or IDs
            message: Rendered notification

        Returns:
            Slack response bodies, one per channel

        Raises:
            SlackTransportError: If any channel fails
        """
        responses = []
        for channel in channels:
            try:
                responses.append(self._post(channel, message.to_payload(channel)))
            except SlackTransportError as e:
                logger.warning("Failed to send Slack notification: %s", e)
                raise
            logger.debug("Slack notification sent to %s", channel)
        return responses
