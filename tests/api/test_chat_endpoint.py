from unittest.mock import AsyncMock

import pytest

from learnhub.api.deps import get_chat_service
from learnhub.core.exceptions import ProviderError


@pytest.fixture
def mock_chat_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_chat_service] = lambda: service
    return service


def test_chat_returns_reply_text(client, mock_chat_service):
    mock_chat_service.reply.return_value = "A noun names a person, place or thing."

    response = client.post(
        "/api/v1/chat",
        json={
            "message": "What is a noun?",
            "history": [{"role": "user", "content": "hi"}, {"role": "model", "content": "hello"}],
        },
    )

    assert response.status_code == 200
    assert response.json() == {"text": "A noun names a person, place or thing."}
    mock_chat_service.reply.assert_awaited_once_with(
        "What is a noun?",
        history=[{"role": "user", "content": "hi"}, {"role": "model", "content": "hello"}],
        image=None,
    )


def test_chat_forwards_image(client, mock_chat_service):
    mock_chat_service.reply.return_value = "A triangle."

    client.post("/api/v1/chat", json={"message": "Shape?", "image": "data:image/png;base64,AA=="})

    assert mock_chat_service.reply.await_args.kwargs["image"] == "data:image/png;base64,AA=="


def test_chat_rejects_empty_message(client, mock_chat_service):
    response = client.post("/api/v1/chat", json={"message": ""})

    assert response.status_code == 422


def test_chat_provider_failure(client, mock_chat_service):
    mock_chat_service.reply.side_effect = ProviderError(
        "Invalid API key. Please check your Gemini API key configuration.",
        kind=ProviderError.INVALID_KEY,
    )

    response = client.post("/api/v1/chat", json={"message": "Hi"})

    assert response.status_code == 502
    assert "Invalid API key" in response.json()["detail"]
