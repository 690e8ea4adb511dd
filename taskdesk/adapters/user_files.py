"""JSON-array-per-user file helpers shared by the file-backed adapters."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def atomic_write(path: Path, payload: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    data = json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
    with open(tmp_path, "wb") as handle:
        handle.write(data)
        handle.flush()
        os.fsync(handle.fileno())
    os.replace(tmp_path, path)


def create_exclusive(path: Path, payload: Any) -> bool:
    """Write ``payload`` only if ``path`` does not exist yet; False when it does."""

    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        handle = open(path, "x", encoding="utf-8")
    except FileExistsError:
        return False
    with handle:
        handle.write(json.dumps(payload, ensure_ascii=False, indent=2))
    return True


def load_tasks(path: Path) -> list[dict[str, Any]]:
    """Read a user's task array; unreadable or corrupt files count as empty."""

    if not path.exists():
        return []
    try:
        text = path.read_text(encoding="utf-8").strip()
        if not text:
            return []
        data = json.loads(text)
    except (OSError, ValueError):
        logger.warning("Unreadable task file %s; treating as empty", path.name, exc_info=True)
        return []
    if not isinstance(data, list):
        logger.warning("Task file %s does not hold a JSON array; treating as empty", path.name)
        return []
    tasks = [item for item in data if isinstance(item, dict)]
    if len(tasks) != len(data):
        logger.warning("Dropped %d non-object entries from %s", len(data) - len(tasks), path.name)
    return tasks
