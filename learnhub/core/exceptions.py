"""
Exception hierarchy for the LearnHub application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LearnHubException(Exception):
    """Base exception for all LearnHub application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(LearnHubException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConfigurationError(LearnHubException):
    """Raised when required configuration (API keys, credentials) is missing."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            setting: Environment variable or setting name that is missing
        """
        super().__init__(message, {"setting": setting} if setting else None)


class ProviderError(LearnHubException):
    """Raised when a generative AI provider rejects or fails a request."""

    INVALID_KEY = "invalid_key"
    QUOTA = "quota_exceeded"
    CONTENT_POLICY = "content_policy"
    MODEL_LOADING = "model_loading"
    INVALID_INPUT = "invalid_input"
    UNKNOWN = "unknown"

    def __init__(
        self,
        message: str,
        kind: str = UNKNOWN,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            message: Human-readable error message
            kind: Error category (one of the class constants)
            provider: Provider name (gemini, imagen, veo)
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        self.kind = kind
        super().__init__(message, details)


class GenerationError(LearnHubException):
    """Raised when an asynchronous generation job ends in failure."""

    def __init__(self, message: str, job_id: str | None = None) -> None:
        super().__init__(message, {"job_id": job_id} if job_id else None)


class StoreError(LearnHubException):
    """Raised when a document store operation fails."""

    def __init__(
        self,
        message: str,
        collection: str | None = None,
        operation: str | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Generic "Failed to <op> <record>" message
            collection: Collection involved
            operation: Operation that failed (add, update, delete, query)
        """
        details: dict[str, Any] = {}
        if collection:
            details["collection"] = collection
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class RecordNotFoundError(LearnHubException):
    """Raised when a stored record cannot be found."""

    def __init__(self, collection: str, record_id: str) -> None:
        """
        Initialize record not found error.

        Args:
            collection: Collection that was searched
            record_id: ID of the missing record
        """
        self.collection = collection
        self.record_id = record_id
        super().__init__(
            f"Record not found: {collection}/{record_id}",
            {"collection": collection, "record_id": record_id},
        )
