"""
Slack Build Notifier

Decides whether a build event warrants a Slack message, renders it and
dispatches it to the pipeline's configured channels.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from .config import NotifierConfig
from .decorators import capture_errors, track_performance
from .render import render_message
from .sentry.setup import set_build_context
from .settings import normalize_settings
from .slack.client import SlackClient
from .types import BuildEvent, NotificationSettings, NotifyResult, RenderedMessage
from .validation import parse_build_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedNotification:
    """A notification that passed every gate and is ready to send."""

    event: BuildEvent
    settings: NotificationSettings
    message: RenderedMessage


def prepare_notification(build_data: Any) -> Union[PreparedNotification, NotifyResult]:
    """
    Run the validation and filtering gates, then render.

    Args:
        build_data: Raw build data emitted with a build status event

    Returns:
        PreparedNotification, or a skipped/invalid NotifyResult describing
        which gate stopped it
    """
    event = parse_build_event(build_data)
    if event is None:
        return NotifyResult.invalid("Invalid build data format")

    if event.opted_out:
        logger.debug("No notification settings for %s, skipping", event.repo_name)
        return NotifyResult.skipped("Pipeline has no notification settings")

    settings = normalize_settings(event.slack)

    if not settings.should_notify(event.status):
        logger.debug(
            "Status %s not in notify statuses for %s, skipping",
            event.status.value,
            event.repo_name,
        )
        return NotifyResult.skipped(f"Status {event.status.value} is not notified")

    if not settings.minimized and event.commit is None:
        logger.debug("Ignoring build data: event is missing commit details")
        return NotifyResult.invalid("Build data is missing commit details")

    return PreparedNotification(
        event=event,
        settings=settings,
        message=render_message(event, settings),
    )


class SlackNotifier:
    """
    Sends build status notifications to Slack.

    Usage:
        notifier = SlackNotifier(NotifierConfig.from_env())
        host.register(notifier)

        # Or directly, once per build status update:
        notifier.notify(build_data)
    """

    def __init__(
        self,
        config: Optional[NotifierConfig] = None,
        client: Optional[SlackClient] = None,
    ):
        """
        Initialize Slack notifier.

        Args:
            config: NotifierConfig with Slack token
            client: Transport override, built from config when omitted

        Raises:
            ConfigError: If the config has no Slack token
        """
        self.config = (config or NotifierConfig.from_env()).validate()
        self.client = client or SlackClient(
            token=self.config.slack_token,
            api_url=self.config.slack_api_url,
            timeout=self.config.slack_timeout_seconds,
        )

    @capture_errors(step_name="slack_dispatch")
    @track_performance(operation_name="slack_dispatch")
    def _dispatch(self, prepared: PreparedNotification) -> None:
        event = prepared.event
        set_build_context(
            repo_name=event.repo_name,
            build_id=event.build_id,
            status=event.status.value,
            job_name=event.job_name,
        )
        self.client.post_message(prepared.settings.channels, prepared.message)

    def notify(self, build_data: Any) -> NotifyResult:
        """
        Handle one build status event.

        Invalid data, opted-out pipelines and unwatched statuses are skipped
        without raising. Transport failures propagate.

        Args:
            build_data: Build data emitted with a build status event

        Returns:
            NotifyResult describing what happened

        Raises:
            SlackTransportError: If Slack delivery fails
        """
        prepared = prepare_notification(build_data)
        if isinstance(prepared, NotifyResult):
            return prepared

        self._dispatch(prepared)

        channels = prepared.settings.channels
        logger.info(
            "Sent %s notification for %s #%d to %s",
            prepared.event.status.value,
            prepared.event.repo_name,
            prepared.event.build_id,
            ", ".join(channels),
        )
        return NotifyResult.sent(channels, prepared.message.text)
