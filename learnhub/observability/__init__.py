"""
Observability module.

Provides logging configuration, request context (correlation ID, user)
and request middleware.
"""

from learnhub.observability.correlation import (
    get_correlation_id,
    get_user_id,
    set_correlation_id,
)
from learnhub.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "get_user_id",
    "set_correlation_id",
]
