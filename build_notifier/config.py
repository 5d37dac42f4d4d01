"""
Notifier Configuration

Loads notifier settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_SLACK_API_URL = "https://slack.com/api"


class ConfigError(ValueError):
    """Raised when the notifier configuration is unusable."""


@dataclass
class NotifierConfig:
    """Configuration for the Slack notifier."""

    # Slack settings
    slack_token: Optional[str] = field(default=None)
    slack_api_url: str = DEFAULT_SLACK_API_URL
    slack_timeout_seconds: int = 10

    # Sentry settings
    sentry_dsn: Optional[str] = field(default=None)
    sentry_environment: str = "production"
    sentry_traces_sample_rate: float = 0.0

    @classmethod
    def from_env(cls) -> "NotifierConfig":
        """Create config from environment variables."""
        return cls(
            slack_token=os.getenv("SLACK_TOKEN"),
            slack_api_url=os.getenv("SLACK_API_URL", DEFAULT_SLACK_API_URL),
            slack_timeout_seconds=int(os.getenv("SLACK_TIMEOUT_SECONDS", "10")),
            sentry_dsn=os.getenv("SENTRY_DSN"),
            sentry_environment=os.getenv("SENTRY_ENVIRONMENT", "production"),
            sentry_traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
        )

    @property
    def sentry_enabled(self) -> bool:
        """Check if Sentry tracking is configured."""
        return bool(self.sentry_dsn)

    def validate(self) -> "NotifierConfig":
        """
        Check the config is usable for sending notifications.

        Returns:
            self, for chaining

        Raises:
            ConfigError: If the Slack token is missing or not a string
        """
        if not isinstance(self.slack_token, str) or not self.slack_token:
            raise ConfigError("Invalid config for slack notifications: token is required")
        if self.slack_timeout_seconds <= 0:
            raise ConfigError("Invalid config for slack notifications: timeout must be positive")
        return self
