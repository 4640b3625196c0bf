import threading
import uuid

from person_registry_api.app.core.store import SEED_PERSONS, PersonStore


def test_new_store_holds_seed_record():
    store = PersonStore()
    assert store.all() == [{"id": "1", "name": "Sam", "age": "26", "hobbies": []}]


def test_stores_do_not_share_state():
    first = PersonStore()
    second = PersonStore()
    first.append({"id": "x", "name": "X", "age": 1, "hobbies": []})
    first.find("1")["hobbies"].append("chess")
    assert len(second) == 1
    assert second.find("1")["hobbies"] == []
    assert SEED_PERSONS[0]["hobbies"] == []


def test_custom_seed():
    store = PersonStore(seed=[])
    assert len(store) == 0
    assert store.find("1") is None


def test_index_of_and_find():
    store = PersonStore()
    store.append({"id": "a", "name": "A", "age": 1, "hobbies": []})
    assert store.index_of("a") == 1
    assert store.index_of("missing") == -1
    assert store.find("a")["name"] == "A"


def test_all_returns_snapshot():
    store = PersonStore()
    snapshot = store.all()
    store.append({"id": "a", "name": "A", "age": 1, "hobbies": []})
    assert len(snapshot) == 1


def test_put_and_replace_all():
    store = PersonStore()
    store.put(0, {"id": "1", "name": "Sammy", "age": 27, "hobbies": []})
    assert store.find("1")["name"] == "Sammy"
    store.replace_all([])
    assert store.all() == []


def test_new_id_skips_existing_ids(monkeypatch):
    store = PersonStore(seed=[{"id": "00000000-0000-0000-0000-000000000001"}])
    ids = iter([uuid.UUID(int=1), uuid.UUID(int=2)])
    monkeypatch.setattr(uuid, "uuid4", lambda: next(ids))
    assert store.new_id() == "00000000-0000-0000-0000-000000000002"


def test_concurrent_appends_keep_every_record():
    store = PersonStore(seed=[])

    def worker():
        for _ in range(100):
            with store.lock:
                store.append({"id": store.new_id()})

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    ids = [person["id"] for person in store.all()]
    assert len(ids) == 400
    assert len(set(ids)) == 400
