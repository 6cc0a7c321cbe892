"""
Test suite for provider error classification.

System role: Verification of human-readable provider failure messages
"""

import pytest

from learnhub.core.exceptions import ConfigurationError, ProviderError
from learnhub.core.generation.provider import create_google_client, describe_provider_error


class FakeAPIError(Exception):
    def __init__(self, message: str, code: int | None = None, status: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.status = status


@pytest.mark.parametrize(
    ("exc", "kind"),
    [
        (FakeAPIError("API key not valid. Please pass a valid API key.", code=400), ProviderError.INVALID_KEY),
        (FakeAPIError("denied", code=403), ProviderError.INVALID_KEY),
        (FakeAPIError("Too many requests", code=429), ProviderError.QUOTA),
        (FakeAPIError("Quota exceeded for metric"), ProviderError.QUOTA),
        (FakeAPIError("Prompt blocked by safety filters"), ProviderError.CONTENT_POLICY),
        (FakeAPIError("Model is currently loading", code=503), ProviderError.MODEL_LOADING),
        (FakeAPIError("bad field", status="INVALID_ARGUMENT"), ProviderError.INVALID_INPUT),
        (RuntimeError("socket closed"), ProviderError.UNKNOWN),
    ],
)
def test_describe_provider_error_should_classify(exc: Exception, kind: str) -> None:
    error = describe_provider_error(exc, provider="imagen")

    assert error.kind == kind
    assert error.details["provider"] == "imagen"
    assert error.details["error_type"] == type(exc).__name__


def test_quota_message_should_be_human_readable() -> None:
    error = describe_provider_error(FakeAPIError("RESOURCE_EXHAUSTED", code=429), provider="veo")

    assert error.message == "API quota exceeded. Please try again later."


def test_unknown_error_message_should_name_provider_and_cause() -> None:
    error = describe_provider_error(RuntimeError("socket closed"), provider="gemini")

    assert error.message == "gemini request failed: socket closed"


def test_provider_error_should_pass_through_unchanged() -> None:
    original = ProviderError("already described", kind=ProviderError.CONTENT_POLICY)

    assert describe_provider_error(original, provider="veo") is original


def test_create_google_client_without_key_should_raise() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        create_google_client(None)

    assert exc_info.value.details == {"setting": "GEMINI_API_KEY"}
