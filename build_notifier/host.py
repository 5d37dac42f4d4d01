"""
Notification Host

Routes CI server events to the notifiers registered for them.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Protocol, runtime_checkable

from .types import NotifyResult

logger = logging.getLogger(__name__)

# Emitted whenever a build's status is updated
BUILD_STATUS_EVENT = "build_status"


@runtime_checkable
class Notifier(Protocol):
    """Anything that can handle build data for an event."""

    def notify(self, build_data: Any) -> NotifyResult:
        ...


class NotificationHost:
    """
    Registry of notifiers keyed by event name.

    Usage:
        host = NotificationHost()
        host.register(SlackNotifier(config))
        host.emit(BUILD_STATUS_EVENT, build_data)
    """

    def __init__(self):
        self._listeners: Dict[str, List[Notifier]] = defaultdict(list)

    def register(self, notifier: Notifier, event_name: str = BUILD_STATUS_EVENT) -> None:
        """
        Register a notifier for an event.

        Raises:
            TypeError: If the object has no notify method
        """
        if not isinstance(notifier, Notifier):
            raise TypeError(f"{type(notifier).__name__} does not implement notify()")
        self._listeners[event_name].append(notifier)
        logger.debug("Registered %s for %s", type(notifier).__name__, event_name)

    def listeners(self, event_name: str) -> List[Notifier]:
        """Notifiers registered for an event, in registration order."""
        return list(self._listeners.get(event_name, []))

    def emit(self, event_name: str, build_data: Any) -> List[NotifyResult]:
        """
        Deliver build data to every notifier registered for the event.

        Transport errors from a notifier propagate and stop the remaining
        notifiers.

        Returns:
            One NotifyResult per registered notifier
        """
        return [notifier.notify(build_data) for notifier in self.listeners(event_name)]
