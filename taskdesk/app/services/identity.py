"""Registration and presence-only sign-in."""

from __future__ import annotations

import logging
from typing import Any

from taskdesk.app.core.errors import InvalidUsername, UserNotFound
from taskdesk.app.core.usernames import is_valid_username
from taskdesk.ports.user_registry import IUserRegistry

logger = logging.getLogger(__name__)


def require_valid_username(username: Any) -> str:
    if not is_valid_username(username):
        raise InvalidUsername()
    return username


def register(registry: IUserRegistry, username: Any) -> None:
    registry.register(require_valid_username(username))


def sign_in(registry: IUserRegistry, username: Any) -> None:
    username = require_valid_username(username)
    if not registry.exists(username):
        raise UserNotFound()
    logger.debug("sign-in", extra={"user": username, "op": "signin"})
