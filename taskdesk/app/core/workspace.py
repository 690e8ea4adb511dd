import base64
from pathlib import Path
from typing import Optional

from taskdesk.app.config import get_settings


def data_root(base: Optional[str] = None) -> Path:
    """Return the resolved data directory, creating it when missing."""

    root = Path(base or get_settings().data_dir).expanduser().resolve()
    root.mkdir(parents=True, exist_ok=True)
    return root


def encode_username(username: str) -> str:
    """Filesystem-safe, reversible name for a username (unpadded base64url)."""

    raw = username.encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_username(encoded: str) -> str:
    pad = "=" * (-len(encoded) % 4)
    return base64.urlsafe_b64decode((encoded + pad).encode("ascii")).decode("utf-8")


def user_file(root: Path, username: str) -> Path:
    return root / f"{encode_username(username)}.json"
