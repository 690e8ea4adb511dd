"""MongoDB-backed identity registry (``users`` collection)."""

from __future__ import annotations

import logging

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from taskdesk.app.core.errors import UserAlreadyExists
from taskdesk.ports.user_registry import IUserRegistry

logger = logging.getLogger(__name__)


class MongoUserRegistry(IUserRegistry):
    def __init__(self, db: Database) -> None:
        self._users = db["users"]
        self._users.create_index("username", unique=True)

    def register(self, username: str) -> None:
        try:
            self._users.insert_one({"username": username})
        except DuplicateKeyError as exc:
            raise UserAlreadyExists(cause=exc) from exc
        logger.info("user registered", extra={"user": username, "op": "register", "backend": "mongo"})

    def exists(self, username: str) -> bool:
        return self._users.find_one({"username": username}, {"_id": 1}) is not None
