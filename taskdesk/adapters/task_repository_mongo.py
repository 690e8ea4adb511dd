"""MongoDB-backed task repository (``tasks`` collection).

Updates and deletes address a task by its id alone; the username in the
request path only scopes listing.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.database import Database

from taskdesk.app.core.errors import TaskNotFound
from taskdesk.ports.task_repository import ITaskRepository

logger = logging.getLogger(__name__)


def _object_id(task_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(task_id)
    except (InvalidId, TypeError):
        return None


def _to_record(doc: dict[str, Any]) -> dict[str, Any]:
    record: dict[str, Any] = {"id": str(doc["_id"])}
    record.update((key, value) for key, value in doc.items() if key != "_id")
    return record


class MongoTaskRepository(ITaskRepository):
    """Task repository persisted as documents in MongoDB."""

    backend = "mongo"

    def __init__(self, db: Database) -> None:
        self._tasks = db["tasks"]
        self._tasks.create_index("username")

    def list_tasks(self, username: str) -> list[dict[str, Any]]:
        cursor = self._tasks.find({"username": username}).sort("_id", ASCENDING)
        return [_to_record(doc) for doc in cursor]

    def add_task(self, username: str, fields: dict[str, Any]) -> dict[str, Any]:
        doc = {"username": username}
        doc.update(fields)
        result = self._tasks.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("task %s added", result.inserted_id, extra={"user": username, "op": "add", "backend": self.backend})
        return _to_record(doc)

    def update_task(self, username: str, task_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        oid = _object_id(task_id)
        if oid is None:
            raise TaskNotFound()
        if patch:
            doc = self._tasks.find_one_and_update(
                {"_id": oid},
                {"$set": patch},
                return_document=ReturnDocument.AFTER,
            )
        else:
            doc = self._tasks.find_one({"_id": oid})
        if doc is None:
            raise TaskNotFound()
        logger.info("task %s updated", task_id, extra={"user": username, "op": "update", "backend": self.backend})
        return _to_record(doc)

    def delete_task(self, username: str, task_id: str) -> None:
        oid = _object_id(task_id)
        if oid is None:
            return
        result = self._tasks.delete_one({"_id": oid})
        logger.debug(
            "task %s delete removed=%d",
            task_id,
            result.deleted_count,
            extra={"user": username, "op": "delete", "backend": self.backend},
        )
