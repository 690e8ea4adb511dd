import re
from typing import Any, Optional

from taskdesk.app.config import get_settings

# A username must carry at least one character outside [A-Za-z0-9].
_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")


def is_valid_username(
    value: Any,
    *,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> bool:
    if not isinstance(value, str) or not value:
        return False
    if min_length is None or max_length is None:
        settings = get_settings()
        min_length = settings.username_min_length if min_length is None else min_length
        max_length = settings.username_max_length if max_length is None else max_length
    if len(value) < min_length or len(value) > max_length:
        return False
    return bool(_NON_ALNUM_RE.search(value))
