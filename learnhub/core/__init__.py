"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components.
All business rules and domain-specific logic reside here.
"""

from learnhub.core.exceptions import (
    ConfigurationError,
    GenerationError,
    LearnHubException,
    ProviderError,
    RecordNotFoundError,
    StoreError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "GenerationError",
    "LearnHubException",
    "ProviderError",
    "RecordNotFoundError",
    "StoreError",
    "ValidationError",
]
