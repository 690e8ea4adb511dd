"""Dependency providers wiring storage adapters into the routes."""

from __future__ import annotations

import logging
from functools import lru_cache

from taskdesk.app.config import get_settings
from taskdesk.app.core.locks import KeyedLock
from taskdesk.ports.task_repository import ITaskRepository
from taskdesk.ports.user_registry import IUserRegistry

logger = logging.getLogger(__name__)

SUPPORTED_BACKENDS = {"file", "mongo"}


def selected_backend() -> str:
    backend = get_settings().backend
    if backend not in SUPPORTED_BACKENDS:
        raise RuntimeError(f"Unsupported TASK_REPO_BACKEND: {backend!r}")
    return backend


@lru_cache()
def _user_locks() -> KeyedLock:
    return KeyedLock()


@lru_cache()
def get_mongo_database():
    from taskdesk.adapters.mongo_client import get_database

    return get_database()


@lru_cache()
def get_user_registry() -> IUserRegistry:
    """Return the identity registry for the configured backend."""
    backend = selected_backend()
    logger.info("UserRegistry backend=%s", backend, extra={"backend": backend})
    if backend == "mongo":
        from taskdesk.adapters.user_registry_mongo import MongoUserRegistry

        return MongoUserRegistry(get_mongo_database())
    from taskdesk.adapters.user_registry_file import FileUserRegistry

    return FileUserRegistry()


@lru_cache()
def get_task_repository() -> ITaskRepository:
    """Return the task repository for the configured backend."""
    backend = selected_backend()
    logger.info("TaskRepository backend=%s", backend, extra={"backend": backend})
    if backend == "mongo":
        from taskdesk.adapters.task_repository_mongo import MongoTaskRepository

        return MongoTaskRepository(get_mongo_database())
    from taskdesk.adapters.task_repository_file import FileTaskRepository

    return FileTaskRepository(locks=_user_locks())


def reset_providers() -> None:
    """Drop cached adapters (used after settings change)."""
    for provider in (get_user_registry, get_task_repository, get_mongo_database, _user_locks):
        provider.cache_clear()
