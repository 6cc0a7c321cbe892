"""
Service error handling utilities.

Maps domain exceptions to HTTP responses: a decorator for endpoints and
app-level handlers for errors raised while resolving dependencies.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from learnhub.core.exceptions import (
    ConfigurationError,
    GenerationError,
    LearnHubException,
    ProviderError,
    RecordNotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

_STATUS_BY_TYPE: tuple[tuple[type[LearnHubException], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (RecordNotFoundError, status.HTTP_404_NOT_FOUND),
    (ProviderError, status.HTTP_502_BAD_GATEWAY),
    (ConfigurationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (GenerationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: LearnHubException) -> int:
    """HTTP status code for a domain exception."""
    for exc_type, code in _STATUS_BY_TYPE:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _log(exc: LearnHubException, code: int) -> None:
    if code >= 500:
        logger.error(
            f"{type(exc).__name__}: {exc.message}",
            extra={"status_code": code, "details": exc.details},
        )
    else:
        logger.warning(
            f"{type(exc).__name__}: {exc.message}",
            extra={"status_code": code, "details": exc.details},
        )


def handle_service_errors(func: F) -> F:
    """
    Decorator to transform domain errors into HTTPExceptions.

    This centralizes:
    - Logging of errors with context
    - Mapping domain exceptions to HTTP status codes
    - Uniform {"detail": message} error bodies
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except LearnHubException as e:
            code = status_for(e)
            _log(e, code)
            raise HTTPException(status_code=code, detail=e.message) from e

    return wrapper  # type: ignore


async def _learnhub_exception_handler(request: Request, exc: LearnHubException) -> JSONResponse:
    code = status_for(exc)
    _log(exc, code)
    return JSONResponse(status_code=code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """Handle domain errors raised outside decorated endpoints (e.g. in dependencies)."""
    app.add_exception_handler(LearnHubException, _learnhub_exception_handler)
