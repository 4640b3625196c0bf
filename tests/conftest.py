import pytest
from fastapi.testclient import TestClient

from person_registry_api.app.core.config import Settings
from person_registry_api.app.core.store import PersonStore
from person_registry_api.app.main import create_app


@pytest.fixture
def store():
    return PersonStore()


@pytest.fixture
def app(store):
    return create_app(settings=Settings(cors_origins="*", person_allow_unknown_fields=True), store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def strict_client(store):
    strict_app = create_app(settings=Settings(person_allow_unknown_fields=False), store=store)
    with TestClient(strict_app) as test_client:
        yield test_client


@pytest.fixture
def person_body():
    return {"name": "Ada", "age": 36, "hobbies": ["chess", "math"]}
