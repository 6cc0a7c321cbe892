"""
Router utility functions.

Contains helper functions extracted from router endpoints to keep them clean.
"""

from learnhub.api.routers.router_utils.error_handling import (
    handle_service_errors,
    register_exception_handlers,
    status_for,
)

__all__ = [
    "handle_service_errors",
    "register_exception_handlers",
    "status_for",
]
