"""
Slack Message Rendering

Builds the header line and attachment for build status notifications.
"""

from typing import Any, Dict

from .types import (
    COLOR_MAP,
    EMOJI_MAP,
    BuildEvent,
    NotificationSettings,
    RenderedMessage,
)

COMMIT_MESSAGE_CUTOFF = 150
SHA_LENGTH = 6


def pipeline_link(build_link: str) -> str:
    """Strip the `/builds...` suffix from a build link."""
    return build_link.split("/builds")[0]


def truncate_sha(sha: str) -> str:
    """Short form of a commit sha."""
    return sha[:SHA_LENGTH]


def truncate_commit_message(message: str, cutoff: int = COMMIT_MESSAGE_CUTOFF) -> str:
    """Cut long commit messages down to `cutoff` characters plus an ellipsis."""
    if len(message) > cutoff:
        return message[:cutoff] + "..."
    return message


def _link(url: str, label: str) -> str:
    """Slack mrkdwn link."""
    return f"<{url}|{label}>"


def _pipeline_label(event: BuildEvent, separator: str) -> str:
    if event.job_name is None:
        return event.repo_name
    return f"{event.repo_name}{separator}{event.job_name}"


def _minimized_attachment(event: BuildEvent) -> Dict[str, Any]:
    return {
        "fallback": "",
        "color": COLOR_MAP[event.status],
        "fields": [
            {
                "title": "Build",
                "value": _link(event.build_link, f"#{event.build_id}"),
                "short": True,
            }
        ],
    }


def _full_attachment(event: BuildEvent) -> Dict[str, Any]:
    commit = event.commit
    if commit is None:
        raise ValueError("Full notifications require commit details")

    commit_message = truncate_commit_message(commit.message)
    sha_link = _link(commit.url, truncate_sha(commit.sha))
    return {
        "fallback": "",
        "color": COLOR_MAP[event.status],
        "title": f"#{event.build_id}",
        "title_link": event.build_link,
        "text": f"{commit_message} ({sha_link})\n{commit.cause_message}",
    }


def render_header(event: BuildEvent, minimized: bool = False) -> str:
    """
    Build the header line of a notification.

    Args:
        event: Build event
        minimized: Use the compact single-line form

    Returns:
        Slack mrkdwn header text
    """
    link = pipeline_link(event.build_link)
    status = event.status.value

    if minimized:
        return f"{_link(link, _pipeline_label(event, '#'))} *{status}*"

    emoji = EMOJI_MAP[event.status]
    return f"*{status}* {emoji} {_link(link, _pipeline_label(event, ' '))}"


def render_message(event: BuildEvent, settings: NotificationSettings) -> RenderedMessage:
    """
    Render the full notification for a build event.

    Minimized messages carry a single "Build" field. Full messages link the
    build number and include the commit message and cause.

    Args:
        event: Build event
        settings: Canonical notification settings

    Returns:
        RenderedMessage with header text and one attachment
    """
    if settings.minimized:
        attachment = _minimized_attachment(event)
    else:
        attachment = _full_attachment(event)

    return RenderedMessage(
        text=render_header(event, minimized=settings.minimized),
        attachments=[attachment],
    )
