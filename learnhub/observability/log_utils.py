"""
Helpers for logging user content and provider failures.

Prompts, narration scripts and data URLs are collapsed and shortened before
they reach a log line, and context keys that look like credentials are
masked.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

REDACTED = "***"
SENSITIVE_KEY_MARKERS = ("api_key", "apikey", "token", "secret", "password", "authorization")

_WHITESPACE = re.compile(r"\s+")


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return any(marker in lowered for marker in SENSITIVE_KEY_MARKERS)


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Render a value for a single log line.

    Data URLs keep only their header, text is collapsed onto one line,
    containers and bytes are reduced to their size.

    Args:
        value: Value to render
        max_length: Maximum length before truncating

    Returns:
        str: Log-safe representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"bytes({len(value)})"
    if isinstance(value, str):
        if value.startswith("data:"):
            return f"{value.split(',', 1)[0]},...({len(value)} chars)"
        text = _WHITESPACE.sub(" ", value).strip()
    elif isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, Mapping):
        return f"dict({len(value)} keys)"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def redact_context(context: Mapping[str, Any]) -> dict[str, str]:
    """Log-safe copy of structured context with credential-like keys masked."""
    return {
        key: REDACTED if _is_sensitive(key) else safe_log_value(value)
        for key, value in context.items()
    }


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its traceback and structured context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Extra fields (job_id, collection, prompt, ...)
    """
    extra = redact_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc), max_length=500)
    logger.error(message, exc_info=exc, extra=extra)
