"""
Slack Settings Normalizer

A pipeline's `slack` setting may be written three ways:

    slack: "#builds"
    slack: ["#builds", "#team"]
    slack:
      channels: ["#builds"]
      statuses: ["SUCCESS", "FAILURE"]
      minimized: true

Each shape is parsed into its own variant type, then normalized into a single
NotificationSettings value.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, Optional, Tuple, Union

from .types import DEFAULT_STATUSES, BuildStatus, NotificationSettings

STRUCTURED_KEYS = frozenset({"channels", "statuses", "minimized"})


@dataclass(frozen=True)
class ChannelString:
    """`slack: "#channel"`"""

    channel: str

    def to_settings(self) -> NotificationSettings:
        return NotificationSettings(channels=(self.channel,))


@dataclass(frozen=True)
class ChannelList:
    """`slack: ["#a", "#b"]`"""

    channels: Tuple[str, ...]

    def to_settings(self) -> NotificationSettings:
        return NotificationSettings(channels=self.channels)


@dataclass(frozen=True)
class StructuredSettings:
    """`slack: {channels, statuses?, minimized?}`"""

    channels: Tuple[str, ...]
    statuses: Optional[FrozenSet[BuildStatus]] = None
    minimized: Optional[bool] = None

    def to_settings(self) -> NotificationSettings:
        return NotificationSettings(
            channels=self.channels,
            statuses=DEFAULT_STATUSES if self.statuses is None else self.statuses,
            minimized=bool(self.minimized),
        )


SlackSettings = Union[ChannelString, ChannelList, StructuredSettings]


def _is_channel(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _parse_channels(value: Any) -> Optional[Tuple[str, ...]]:
    """Parse a non-empty list of channel names."""
    if not isinstance(value, list) or not value:
        return None
    if not all(_is_channel(channel) for channel in value):
        return None
    return tuple(value)


def _parse_statuses(value: Any) -> Optional[FrozenSet[BuildStatus]]:
    """Parse a list of status names. An empty list is allowed."""
    if not isinstance(value, list):
        return None
    statuses = set()
    for name in value:
        if not isinstance(name, str) or name not in BuildStatus.__members__:
            return None
        statuses.add(BuildStatus[name])
    return frozenset(statuses)


def _parse_structured(value: dict) -> Optional[StructuredSettings]:
    if not set(value) <= STRUCTURED_KEYS:
        return None

    channels = _parse_channels(value.get("channels"))
    if channels is None:
        return None

    statuses = None
    if "statuses" in value:
        statuses = _parse_statuses(value["statuses"])
        if statuses is None:
            return None

    minimized = value.get("minimized")
    if minimized is not None and not isinstance(minimized, bool):
        return None

    return StructuredSettings(channels=channels, statuses=statuses, minimized=minimized)


def parse_slack_settings(value: Any) -> Optional[SlackSettings]:
    """
    Resolve a raw `slack` setting into one of its variants.

    Args:
        value: Raw value of `settings.slack`

    Returns:
        ChannelString, ChannelList or StructuredSettings, or None if the value
        matches none of the legal shapes
    """
    if isinstance(value, str):
        return ChannelString(value) if _is_channel(value) else None

    if isinstance(value, list):
        channels = _parse_channels(value)
        return ChannelList(channels) if channels is not None else None

    if isinstance(value, dict):
        return _parse_structured(value)

    return None


def normalize_settings(settings: SlackSettings) -> NotificationSettings:
    """
    Produce canonical settings from a parsed variant.

    String and list shorthands get the default statuses and full messages.
    Structured settings keep what they specify and get defaults for the rest.
    """
    return settings.to_settings()
