import logging

from person_registry_api.app.core.config import Settings
from person_registry_api.app.core.logging_config import setup_logging
from person_registry_api.app.core.store import PersonStore
from person_registry_api.app.main import create_app


def test_cors_origin_list_splits_and_strips():
    settings = Settings(cors_origins="http://a.test, http://b.test,")
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


def test_create_app_uses_given_store_and_settings():
    store = PersonStore(seed=[])
    settings = Settings(project_name="Registry Test")
    app = create_app(settings=settings, store=store)
    assert app.state.person_store is store
    assert app.state.settings is settings
    assert app.title == "Registry Test"


def test_setup_logging_keeps_existing_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    handler = logging.NullHandler()
    root.addHandler(handler)
    try:
        setup_logging("DEBUG", "ignored.log")
        assert root.handlers == before + [handler]
    finally:
        root.removeHandler(handler)
