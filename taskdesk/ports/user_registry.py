"""Port interface for the identity registry."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IUserRegistry(Protocol):
    """Tracks which usernames have registered."""

    def register(self, username: str) -> None:
        """Record a new username; raise UserAlreadyExists when already present."""

    def exists(self, username: str) -> bool:
        """Return True when the username has registered."""
