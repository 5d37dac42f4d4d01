"""
Sentry Error Tracking Module

Reports transport failures with build context.
"""

from .setup import (
    init_sentry,
    set_build_context,
    add_breadcrumb,
    capture_exception,
)

__all__ = [
    'init_sentry',
    'set_build_context',
    'add_breadcrumb',
    'capture_exception',
]
