from unittest.mock import AsyncMock

import pytest

from learnhub.api.deps import get_learning_module_service, get_module_authoring_service
from learnhub.core.exceptions import ConfigurationError, ProviderError, ValidationError

USER_HEADERS = {"X-User-ID": "u1"}


@pytest.fixture
def mock_module_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_learning_module_service] = lambda: service
    client.app.dependency_overrides[get_module_authoring_service] = lambda: service
    return service


def test_list_learning_modules(client, mock_module_service, module_record):
    mock_module_service.list_modules.return_value = [module_record]

    response = client.get("/api/v1/learning-modules", headers=USER_HEADERS)

    assert response.status_code == 200
    (module,) = response.json()
    assert module["quiz_data"][0]["correctAnswer"] == "Lava"


def test_create_learning_module(client, mock_module_service, module_record):
    mock_module_service.create_module.return_value = module_record

    response = client.post(
        "/api/v1/learning-modules",
        json={"topic": "Volcanoes", "grade": "6th grade"},
        headers=USER_HEADERS,
    )

    assert response.status_code == 201
    assert response.json()["id"] == module_record["id"]
    mock_module_service.create_module.assert_awaited_once_with("u1", "Volcanoes", "6th grade")


def test_create_learning_module_provider_failure(client, mock_module_service):
    mock_module_service.create_module.side_effect = ProviderError(
        "API quota exceeded. Please try again later.", kind=ProviderError.QUOTA
    )

    response = client.post(
        "/api/v1/learning-modules",
        json={"topic": "Volcanoes", "grade": "6th grade"},
        headers=USER_HEADERS,
    )

    assert response.status_code == 502
    assert response.json() == {"detail": "API quota exceeded. Please try again later."}


def test_create_learning_module_without_api_key(client):
    def missing_key():
        raise ConfigurationError("Gemini API key is not configured", setting="GEMINI_API_KEY")

    client.app.dependency_overrides[get_module_authoring_service] = missing_key

    response = client.post(
        "/api/v1/learning-modules",
        json={"topic": "Volcanoes", "grade": "6th grade"},
        headers=USER_HEADERS,
    )

    assert response.status_code == 500
    assert response.json() == {"detail": "Gemini API key is not configured"}


def test_generate_module_image(client, mock_module_service, module_record):
    mock_module_service.generate_module_image.return_value = {
        **module_record,
        "generated_image_url": "data:image/png;base64,AA==",
    }

    response = client.post(
        f"/api/v1/learning-modules/{module_record['id']}/image", headers=USER_HEADERS
    )

    assert response.status_code == 200
    assert response.json()["generated_image_url"] == "data:image/png;base64,AA=="


def test_generate_module_image_without_description(client, mock_module_service):
    mock_module_service.generate_module_image.side_effect = ValidationError(
        "Module has no image description"
    )

    response = client.post("/api/v1/learning-modules/m-1/image", headers=USER_HEADERS)

    assert response.status_code == 400
