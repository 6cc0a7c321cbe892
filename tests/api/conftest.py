"""
API test fixtures.

Provides: TestClient over a fresh app, sample records as returned by the store
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from learnhub.api.main import create_app

NOW = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def client():
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def note_record() -> dict:
    return {
        "id": "6f1c9a9e-2b1f-4d0e-9b7a-3f8c2d1e0a11",
        "user_id": "u1",
        "title": "Biology",
        "content": "Cells",
        "color": "bg-yellow-100 border-yellow-300",
        "created_at": NOW,
        "updated_at": NOW,
    }


@pytest.fixture
def reminder_record() -> dict:
    return {
        "id": "0d3e7c52-8a0b-4f7e-a1c4-5b6d7e8f9a00",
        "user_id": "u1",
        "title": "Math test",
        "remind_at": NOW,
        "priority": "high",
        "completed": False,
        "created_at": NOW,
        "updated_at": NOW,
    }


@pytest.fixture
def module_record() -> dict:
    return {
        "id": "9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d",
        "user_id": "u1",
        "topic": "Volcanoes",
        "grade": "6th grade",
        "tutorial_content": "Volcanoes are openings in the crust.",
        "quiz_data": [
            {"question": "What comes out?", "options": ["Lava", "Milk"], "correctAnswer": "Lava"}
        ],
        "video_script": "Narrator: magma rises.",
        "image_description": "A cutaway of a volcano",
        "generated_image_url": None,
        "generated_video_url": None,
        "created_at": NOW,
        "updated_at": NOW,
    }
