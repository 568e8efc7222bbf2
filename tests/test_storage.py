from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy.exc import OperationalError

from students_api.errors import NotFoundError, StorageError
from students_api.schemas import StudentIn
from students_api.storage import SQLiteStorage


def test_empty_store_lists_nothing(any_storage):
    assert any_storage.get_all() == []


def test_create_get_update(any_storage):
    sid = any_storage.create("Ada", "ada@example.com", 36)
    got = any_storage.get_by_id(sid)
    assert (got.id, got.name, got.email, got.age) == (sid, "Ada", "ada@example.com", 36)

    updated = any_storage.update_by_id(sid, StudentIn(name="Ada L.", email="adal@example.com", age=37))
    assert updated.id == sid
    assert any_storage.get_by_id(sid) == updated


def test_ids_ascend_in_insertion_order(any_storage):
    ids = [any_storage.create(f"s{i}", f"s{i}@example.com", 18 + i) for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == 5
    assert [s.id for s in any_storage.get_all()] == ids


def test_unknown_id_raises_not_found(any_storage):
    with pytest.raises(NotFoundError):
        any_storage.get_by_id(404)
    with pytest.raises(NotFoundError):
        any_storage.update_by_id(404, StudentIn(name="x", email="x@example.com", age=1))
    # NotFound is a storage error too, but handlers check it first
    assert issubclass(NotFoundError, StorageError)


def test_returned_records_are_copies(any_storage):
    sid = any_storage.create("Ada", "ada@example.com", 36)
    got = any_storage.get_by_id(sid)
    got.name = "mutated"
    assert any_storage.get_by_id(sid).name == "Ada"


def test_concurrent_creates_are_distinct(any_storage):
    n = 20
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda i: any_storage.create(f"s{i}", f"s{i}@example.com", 20), range(n)))
    assert len(set(ids)) == n
    assert len(any_storage.get_all()) == n


def test_sqlite_persists_across_instances(tmp_path):
    path = str(tmp_path / "nested" / "students.db")
    first = SQLiteStorage.from_path(path)
    sid = first.create("Ada", "ada@example.com", 36)
    second = SQLiteStorage.from_path(path)
    assert second.get_by_id(sid).name == "Ada"


def test_sqlite_wraps_engine_errors(tmp_path, monkeypatch):
    store = SQLiteStorage.from_path(str(tmp_path / "students.db"))

    def fail(self):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr("students_api.repositories.StudentRepository.list_all", fail)
    with pytest.raises(StorageError) as info:
        store.get_all()
    assert not isinstance(info.value, NotFoundError)
    assert isinstance(info.value.__cause__, OperationalError)


def test_sqlite_wraps_integer_overflow(tmp_path):
    store = SQLiteStorage.from_path(str(tmp_path / "students.db"))
    with pytest.raises(StorageError) as info:
        store.get_by_id(10**30)
    assert not isinstance(info.value, NotFoundError)
    assert isinstance(info.value.__cause__, OverflowError)
    with pytest.raises(StorageError):
        store.create("Ada", "ada@example.com", 10**30)
    assert store.get_all() == []
