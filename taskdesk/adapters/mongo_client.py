"""Shared MongoDB client helper driven by MONGO_URL / MONGO_DB."""

from __future__ import annotations

import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from taskdesk.app.config import get_settings

logger = logging.getLogger(__name__)


def get_mongo_client(url: Optional[str] = None) -> MongoClient:
    settings = get_settings()
    return MongoClient(url or settings.mongo_url, serverSelectionTimeoutMS=settings.mongo_timeout_ms)


def get_database(client: Optional[MongoClient] = None, name: Optional[str] = None) -> Database:
    client = client or get_mongo_client()
    return client[name or get_settings().mongo_db]


def check_connection(db: Database) -> bool:
    """Ping the server; log and return False when it cannot be reached."""

    try:
        db.client.admin.command("ping")
    except PyMongoError as exc:
        logger.error("MongoDB connection error: %s", exc, extra={"backend": "mongo"})
        return False
    logger.info("MongoDB connected db=%s", db.name, extra={"backend": "mongo"})
    return True
