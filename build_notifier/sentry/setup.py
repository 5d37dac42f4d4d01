"""
Sentry Setup and Context Management

Initializes Sentry SDK and provides context enrichment helpers.
"""

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import NotifierConfig

logger = logging.getLogger(__name__)

# Track initialization state
_sentry_initialized = False


def init_sentry(config: Optional[NotifierConfig] = None) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        config: NotifierConfig with DSN

    Returns:
        True if initialized successfully
    """
    global _sentry_initialized

    if _sentry_initialized:
        return True

    config = config or NotifierConfig.from_env()

    if not config.sentry_enabled:
        logger.debug("Sentry not configured, skipping initialization")
        return False

    logging_integration = LoggingIntegration(
        level=logging.INFO,  # Capture INFO and above as breadcrumbs
        event_level=logging.ERROR,  # Send ERROR and above as events
    )

    sentry_sdk.init(
        dsn=config.sentry_dsn,
        environment=config.sentry_environment,
        traces_sample_rate=config.sentry_traces_sample_rate,
        integrations=[logging_integration],
        send_default_pii=False,
        attach_stacktrace=True,
    )
    sentry_sdk.set_tag("component", "build-notifier")

    _sentry_initialized = True
    logger.debug("Sentry initialized successfully")
    return True


def set_build_context(
    repo_name: str,
    build_id: int,
    status: str,
    job_name: Optional[str] = None,
) -> None:
    """
    Set build context for Sentry.

    Args:
        repo_name: SCM repository name of the pipeline
        build_id: Build number
        status: Build status being notified
        job_name: Job name within the pipeline
    """
    if not _sentry_initialized:
        return

    sentry_sdk.set_context("build", {
        "repo_name": repo_name,
        "job_name": job_name,
        "build_id": build_id,
        "status": status,
    })
    sentry_sdk.set_tag("build_status", status)


def add_breadcrumb(
    message: str,
    category: str = "notify",
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Add a breadcrumb to the current Sentry scope.

    Args:
        message: Breadcrumb message
        category: Category (notify, slack, performance)
        level: Level (debug, info, warning, error)
        data: Additional data
    """
    if not _sentry_initialized:
        return

    sentry_sdk.add_breadcrumb(
        message=message,
        category=category,
        level=level,
        data=data,
    )


def capture_exception(
    exception: Exception,
    level: str = "error",
    tags: Optional[Dict[str, str]] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    Capture an exception and send to Sentry.

    Args:
        exception: The exception to capture
        level: Severity level (error, warning, info)
        tags: Additional tags
        extra: Additional context data

    Returns:
        Sentry event ID if captured, None otherwise
    """
    if not _sentry_initialized:
        return None

    with sentry_sdk.new_scope() as scope:
        scope.set_level(level)

        if tags:
            for key, value in tags.items():
                scope.set_tag(key, value)

        if extra:
            for key, value in extra.items():
                scope.set_extra(key, value)

        return sentry_sdk.capture_exception(exception)
