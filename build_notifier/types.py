"""
Notifier Types

Data structures for build events, notification settings and rendered messages.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Optional, Tuple


class BuildStatus(Enum):
    """Build lifecycle status."""
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ABORTED = "ABORTED"
    RUNNING = "RUNNING"
    QUEUED = "QUEUED"


# Attachment colors, matching the CI UI palette
COLOR_MAP = MappingProxyType({
    BuildStatus.SUCCESS: "good",
    BuildStatus.FAILURE: "danger",
    BuildStatus.ABORTED: "danger",
    BuildStatus.RUNNING: "#0F69FF",
    BuildStatus.QUEUED: "#0F69FF",
})

EMOJI_MAP = MappingProxyType({
    BuildStatus.SUCCESS: ":sunny:",
    BuildStatus.FAILURE: ":umbrella:",
    BuildStatus.ABORTED: ":cloud:",
    BuildStatus.RUNNING: ":runner:",
    BuildStatus.QUEUED: ":cyclone:",
})

DEFAULT_STATUSES: FrozenSet[BuildStatus] = frozenset({BuildStatus.FAILURE})


@dataclass(frozen=True)
class CommitInfo:
    """Commit that triggered the build."""

    sha: str
    message: str
    url: str
    cause_message: str


@dataclass(frozen=True)
class NotificationSettings:
    """Canonical per-pipeline Slack settings."""

    channels: Tuple[str, ...]
    statuses: FrozenSet[BuildStatus] = DEFAULT_STATUSES
    minimized: bool = False

    def should_notify(self, status: BuildStatus) -> bool:
        """Check if a build with this status triggers a notification."""
        return status in self.statuses


@dataclass(frozen=True)
class BuildEvent:
    """A validated build-status event."""

    status: BuildStatus
    repo_name: str
    build_id: int
    build_link: str
    job_name: Optional[str] = None
    commit: Optional[CommitInfo] = None
    # Parsed `slack` settings variant; None when the pipeline has no settings
    slack: Any = None

    @property
    def opted_out(self) -> bool:
        """True when the pipeline carries no notification settings at all."""
        return self.slack is None


@dataclass(frozen=True)
class RenderedMessage:
    """Header line plus Slack attachments for one notification."""

    text: str
    attachments: List[Dict[str, Any]] = field(default_factory=list)

    def to_payload(self, channel: str) -> Dict[str, Any]:
        """Build the chat.postMessage body for a channel."""
        return {
            "channel": channel,
            "text": self.text,
            "attachments": self.attachments,
        }


class NotifyStatus(Enum):
    """Outcome of a notify call."""
    SENT = "sent"
    SKIPPED = "skipped"
    INVALID = "invalid"


@dataclass
class NotifyResult:
    """Result of a single notify call."""
    status: NotifyStatus
    channels: Tuple[str, ...] = ()
    message: str = ""

    @staticmethod
    def sent(channels: Tuple[str, ...], message: str = "") -> 'NotifyResult':
        """Create a sent result."""
        return NotifyResult(NotifyStatus.SENT, tuple(channels), message)

    @staticmethod
    def skipped(message: str) -> 'NotifyResult':
        """Create a skipped result."""
        return NotifyResult(NotifyStatus.SKIPPED, (), message)

    @staticmethod
    def invalid(message: str) -> 'NotifyResult':
        """Create an invalid-input result."""
        return NotifyResult(NotifyStatus.INVALID, (), message)

    @property
    def is_sent(self) -> bool:
        """Check if the notification was dispatched."""
        return self.status == NotifyStatus.SENT

    @property
    def is_skipped(self) -> bool:
        """Check if the notification was skipped."""
        return self.status == NotifyStatus.SKIPPED

    @property
    def is_invalid(self) -> bool:
        """Check if the build data was rejected."""
        return self.status == NotifyStatus.INVALID

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "channels": list(self.channels),
            "message": self.message,
        }
