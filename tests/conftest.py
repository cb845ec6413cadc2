import pytest
from fastapi.testclient import TestClient

from analyzer import SkillAnalyzer
from config import Settings
from errors import ProviderError, StorageError
from main import app
from routes.skill_routes import get_analyzer
from tests.fakes import FakeGenerator, FakeStore


@pytest.fixture
def settings():
    return Settings(
        gemini_api_key="test-gemini-key",
        supabase_url="https://project.supabase.co",
        supabase_service_role_key="service-role-key",
    )


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def client(settings, generator, store):
    app.dependency_overrides[get_analyzer] = lambda: SkillAnalyzer(settings, generator=generator, store=store)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def provider_error():
    return ProviderError('{"error": {"code": 403, "message": "API key not valid"}}')


@pytest.fixture
def storage_error():
    return StorageError('{"message": "relation \\"skill_analyses\\" does not exist"}')
