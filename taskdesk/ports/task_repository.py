"""Port interface for task persistence (repository boundary)."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ITaskRepository(Protocol):
    """Username-scoped task CRUD. Task ids arrive as path strings."""

    backend: str

    def list_tasks(self, username: str) -> list[dict[str, Any]]:
        """Return the user's tasks in storage order (empty when none)."""

    def add_task(self, username: str, fields: dict[str, Any]) -> dict[str, Any]:
        """Persist a new task under a fresh id and return the stored record."""

    def update_task(self, username: str, task_id: str, patch: dict[str, Any]) -> dict[str, Any]:
        """Shallow-merge ``patch`` into a task; raise TaskNotFound when missing."""

    def delete_task(self, username: str, task_id: str) -> None:
        """Remove a task if present; a missing id is not an error."""
