import asyncio

import pytest

from person_registry_api.app.core.store import PersonStore
from person_registry_api.app.services.person_service import PersonService


@pytest.fixture
def service():
    return PersonService(PersonStore())


def run(coro):
    return asyncio.run(coro)


def test_create_puts_id_first(service):
    person = run(service.create_person({"name": "A", "age": 1, "hobbies": []}))
    assert list(person)[0] == "id"
    assert run(service.get_person(person["id"])) == person


def test_create_drops_payload_id(service):
    person = run(service.create_person({"id": "1", "name": "A", "age": 1, "hobbies": []}))
    assert person["id"] != "1"
    assert run(service.get_person("1"))["name"] == "Sam"


def test_replace_missing_returns_none(service):
    assert run(service.replace_person("nope", {"name": "A", "age": 1, "hobbies": []})) is None
    assert len(run(service.list_persons())) == 1


def test_replace_overwrites(service):
    person = run(service.replace_person("1", {"name": "B", "age": 5, "hobbies": []}))
    assert person == {"id": "1", "name": "B", "age": 5, "hobbies": []}
    assert run(service.list_persons()) == [person]


def test_delete(service):
    assert run(service.delete_person("1")) is True
    assert run(service.delete_person("1")) is False
    assert run(service.list_persons()) == []


def test_get_missing_returns_none(service):
    assert run(service.get_person("999999")) is None
