"""
Request context carried through contextvars.

Holds the correlation ID and the acting user (X-User-ID) of the current
request. asyncio tasks copy the context when they are created, so log lines
written by a detached generation job keep the ids of the request that
submitted it.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import re
import uuid
from contextvars import ContextVar, Token

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")
user_id_ctx: ContextVar[str] = ContextVar("user_id", default="")

# Incoming ids are echoed into response headers and log lines.
_VALID_CORRELATION_ID = re.compile(r"^[A-Za-z0-9._:\-]{1,128}$")

RequestContextTokens = tuple[Token[str], Token[str]]


def normalize_correlation_id(candidate: str | None) -> str:
    """Keep a well-formed incoming correlation ID, otherwise mint a new one."""
    if candidate and _VALID_CORRELATION_ID.match(candidate):
        return candidate
    return uuid.uuid4().hex


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Incoming ID; replaced by a new one when absent or malformed

    Returns:
        str: The correlation ID that was set
    """
    value = normalize_correlation_id(correlation_id)
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID, empty outside a request."""
    return correlation_id_ctx.get()


def get_user_id() -> str:
    """User ID of the current request, empty when the request carries none."""
    return user_id_ctx.get()


def bind_request_context(
    correlation_id: str | None,
    user_id: str | None,
) -> tuple[str, RequestContextTokens]:
    """
    Bind the ids of one request.

    Returns:
        tuple: (effective correlation ID, tokens for reset_request_context)
    """
    value = normalize_correlation_id(correlation_id)
    tokens = (correlation_id_ctx.set(value), user_id_ctx.set((user_id or "").strip()))
    return value, tokens


def reset_request_context(tokens: RequestContextTokens) -> None:
    """Restore the context that was active before bind_request_context."""
    correlation_token, user_token = tokens
    user_id_ctx.reset(user_token)
    correlation_id_ctx.reset(correlation_token)
