"""File-backed task repository: one JSON array per user."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Callable, Optional, Union

from taskdesk.adapters.user_files import atomic_write, load_tasks
from taskdesk.app.core.errors import TaskNotFound
from taskdesk.app.core.locks import KeyedLock
from taskdesk.app.core.workspace import data_root, user_file
from taskdesk.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


def _parse_id(task_id: str) -> Optional[int]:
    try:
        return int(task_id)
    except (TypeError, ValueError):
        return None


def _next_id(tasks: list[dict[str, Any]], candidate: int) -> int:
    taken = [t.get("id") for t in tasks if isinstance(t.get("id"), int)]
    if taken and candidate <= max(taken):
        return max(taken) + 1
    return candidate


class FileTaskRepository(ITaskRepository):
    """Task repository persisted as JSON files on disk."""

    backend = "file"

    def __init__(
        self,
        root: Optional[Union[str, Path]] = None,
        locks: Optional[KeyedLock] = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._root = data_root(str(root) if root else None)
        self._locks = locks or KeyedLock()
        self._clock = clock

    def _path(self, username: str) -> Path:
        return user_file(self._root, username)

    def list_tasks(self, username: str) -> list[dict[str, Any]]:
        return load_tasks(self._path(username))

    def add_task(self, username: str, fields: dict[str, Any]) -> dict[str, Any]:
        path = self._path(username)
        with self._locks.hold(username):
            tasks = load_tasks(path)
            task = {"id": _next_id(tasks, self._clock()), "username": username}
            task.update(fields)
            tasks.append(task)
            atomic_write(path, tasks)
        logger.info("task %s added", task["id"], extra={"user": username, "op": "add", "backend": self.backend})
        return task

    def update_task(self, username: str, task_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        wanted = _parse_id(task_id)
        path = self._path(username)
        with self._locks.hold(username):
            tasks = load_tasks(path)
            index = next(
                (i for i, t in enumerate(tasks) if wanted is not None and t.get("id") == wanted),
                None,
            )
            if index is None:
                raise TaskNotFound()
            updated = dict(tasks[index])
            updated.update(patch)
            tasks[index] = updated
            atomic_write(path, tasks)
        logger.info("task %s updated", wanted, extra={"user": username, "op": "update", "backend": self.backend})
        return updated

    def delete_task(self, username: str, task_id: str) -> None:
        wanted = _parse_id(task_id)
        path = self._path(username)
        with self._locks.hold(username):
            tasks = load_tasks(path)
            remaining = [t for t in tasks if wanted is None or t.get("id") != wanted]
            atomic_write(path, remaining)
        logger.debug(
            "task %s delete removed=%d",
            task_id,
            len(tasks) - len(remaining),
            extra={"user": username, "op": "delete", "backend": self.backend},
        )
