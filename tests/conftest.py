import pytest
from fastapi.testclient import TestClient

from students_api.config import Settings
from students_api.main import create_app
from students_api.storage import InMemoryStorage, SQLiteStorage


@pytest.fixture()
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(ENV="test", STORAGE_PATH=str(tmp_path / "students.db"))


@pytest.fixture()
def storage():
    return InMemoryStorage()


@pytest.fixture()
def client(settings, storage):
    """Test client over an in-memory store."""
    return TestClient(create_app(settings, storage))


@pytest.fixture()
def sqlite_client(settings):
    """Test client over a real SQLite file under tmp_path."""
    return TestClient(create_app(settings))


@pytest.fixture(params=["memory", "sqlite"])
def any_storage(request, tmp_path):
    """Each storage backend in turn, empty."""
    if request.param == "memory":
        return InMemoryStorage()
    return SQLiteStorage.from_path(str(tmp_path / "store.db"))


@pytest.fixture()
def anyio_backend():
    """Async tests here use asyncio primitives, so run them on asyncio only."""
    return "asyncio"
