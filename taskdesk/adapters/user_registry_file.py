"""File-backed identity registry: a user is registered when their file exists."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from taskdesk.adapters.user_files import create_exclusive
from taskdesk.app.core.errors import UserAlreadyExists
from taskdesk.app.core.workspace import data_root, user_file
from taskdesk.ports.user_registry import IUserRegistry

logger = logging.getLogger(__name__)


class FileUserRegistry(IUserRegistry):
    def __init__(self, root: Optional[Union[str, Path]] = None) -> None:
        self._root = data_root(str(root) if root else None)

    def register(self, username: str) -> None:
        if not create_exclusive(user_file(self._root, username), []):
            raise UserAlreadyExists()
        logger.info("user registered", extra={"user": username, "op": "register", "backend": "file"})

    def exists(self, username: str) -> bool:
        return user_file(self._root, username).exists()
