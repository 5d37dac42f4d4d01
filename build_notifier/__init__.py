"""Build Notifier - Slack notifications for CI build status events.

Modules:
    types - Build events, settings and message types
    settings - Slack settings shapes and normalization
    validation - Build data input contract
    render - Slack message rendering
    notifier - Notification decision and dispatch
    slack - Slack Web API transport
    host - Event-to-notifier registry
    config - Configuration
"""

from .config import ConfigError, NotifierConfig
from .host import BUILD_STATUS_EVENT, NotificationHost, Notifier
from .notifier import SlackNotifier, prepare_notification
from .settings import normalize_settings, parse_slack_settings
from .slack import SlackClient, SlackTransportError
from .types import (
    BuildEvent,
    BuildStatus,
    NotificationSettings,
    NotifyResult,
    RenderedMessage,
)
from .validation import parse_build_event

__all__ = [
    # Config
    'ConfigError',
    'NotifierConfig',
    # Types
    'BuildEvent',
    'BuildStatus',
    'NotificationSettings',
    'NotifyResult',
    'RenderedMessage',
    # Core
    'normalize_settings',
    'parse_slack_settings',
    'parse_build_event',
    'prepare_notification',
    'SlackNotifier',
    # Transport
    'SlackClient',
    'SlackTransportError',
    # Host
    'BUILD_STATUS_EVENT',
    'NotificationHost',
    'Notifier',
]

__version__ = '2.0.0'
