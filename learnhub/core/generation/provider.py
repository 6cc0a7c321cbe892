"""Google Gemini provider helpers.

Client construction and translation of raw provider failures into
ProviderError with a human-readable message.

Dependencies: google.genai, learnhub.core.exceptions
System role: Shared provider plumbing for image, video and text clients
"""

import logging

from google import genai

from learnhub.core.exceptions import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)

_MESSAGES = {
    ProviderError.INVALID_KEY: "Invalid API key. Please check your Gemini API key configuration.",
    ProviderError.QUOTA: "API quota exceeded. Please try again later.",
    ProviderError.CONTENT_POLICY: (
        "The request was blocked by the provider's content policy. Please rephrase your prompt."
    ),
    ProviderError.MODEL_LOADING: (
        "The model is currently loading. Please wait a moment and try again."
    ),
    ProviderError.INVALID_INPUT: "The provider rejected the request as invalid.",
}


def create_google_client(api_key: str | None) -> genai.Client:
    """Create a google-genai client.

    Raises:
        ConfigurationError: If no API key is configured
    """
    if not api_key:
        raise ConfigurationError("Gemini API key is required", setting="GEMINI_API_KEY")
    logger.debug(f"{__name__}:create_google_client - Creating Google Gemini client")
    return genai.Client(api_key=api_key)


def _classify(exc: Exception) -> str:
    code = getattr(exc, "code", None) or getattr(exc, "status_code", None)
    text = f"{getattr(exc, 'status', '') or ''} {exc}".lower()

    if code in (401, 403) or "api key" in text or "api_key_invalid" in text:
        return ProviderError.INVALID_KEY
    if code == 429 or "quota" in text or "resource_exhausted" in text:
        return ProviderError.QUOTA
    if "safety" in text or "blocked" in text or "content policy" in text:
        return ProviderError.CONTENT_POLICY
    if (
        code == 503
        or "is currently loading" in text
        or "unavailable" in text
        or "overloaded" in text
    ):
        return ProviderError.MODEL_LOADING
    if code == 400 or "invalid_argument" in text:
        return ProviderError.INVALID_INPUT
    return ProviderError.UNKNOWN


def describe_provider_error(exc: Exception, provider: str) -> ProviderError:
    """Map a raw provider exception to a ProviderError.

    Args:
        exc: Exception raised by the provider SDK
        provider: Provider name used in the error context (gemini, imagen, veo)

    Returns:
        ProviderError: Error carrying a categorized kind and descriptive message
    """
    if isinstance(exc, ProviderError):
        return exc
    kind = _classify(exc)
    message = _MESSAGES.get(kind) or f"{provider} request failed: {exc}"
    return ProviderError(
        message,
        kind=kind,
        provider=provider,
        details={"error_type": type(exc).__name__},
    )
