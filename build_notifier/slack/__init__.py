"""
Slack Transport Module

Delivers rendered build notifications through the Slack Web API.
"""

from .client import SlackClient, SlackTransportError

__all__ = [
    'SlackClient',
    'SlackTransportError',
]
