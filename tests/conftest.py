from __future__ import annotations

import mongomock
import pytest
from fastapi.testclient import TestClient

from taskdesk.adapters.task_repository_mongo import MongoTaskRepository
from taskdesk.adapters.user_registry_mongo import MongoUserRegistry
from taskdesk.app.config import get_settings
from taskdesk.app.deps import get_task_repository, get_user_registry, reset_providers
from taskdesk.main import create_app

_ENV_KEYS = (
    "PORT",
    "TASK_REPO_BACKEND",
    "MONGO_URL",
    "MONGO_DB",
    "USERNAME_MIN_LENGTH",
    "USERNAME_MAX_LENGTH",
    "CORS_ALLOW_ORIGINS",
    "APP_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    get_settings.cache_clear()
    reset_providers()
    yield
    get_settings.cache_clear()
    reset_providers()


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def mongo_db():
    return mongomock.MongoClient()["taskdesk"]


@pytest.fixture
def file_client():
    app = create_app()
    with TestClient(app) as client:
        yield client


@pytest.fixture
def mongo_client(mongo_db):
    app = create_app()
    registry = MongoUserRegistry(mongo_db)
    repo = MongoTaskRepository(mongo_db)
    app.dependency_overrides[get_user_registry] = lambda: registry
    app.dependency_overrides[get_task_repository] = lambda: repo
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture(params=["file", "mongo"])
def client(request):
    """HTTP client against each storage backend."""
    return request.getfixturevalue(f"{request.param}_client")
