import logging
from typing import Optional

from taskdesk.app.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [%(backend)s] user=%(user)s op=%(op)s %(message)s"
CONTEXT_KEYS = ("user", "op", "backend")

_handler: Optional[logging.Handler] = None


class RequestContextFilter(logging.Filter):
    """Give every record the ``user``/``op``/``backend`` attributes the format expects."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key in CONTEXT_KEYS:
            if not hasattr(record, key):
                setattr(record, key, "-")
        return True


def configure_logging(level: Optional[str] = None) -> logging.Handler:
    """Attach the taskdesk handler to the ``taskdesk`` logger once; later calls only adjust the level."""
    global _handler

    level_name = (level or get_settings().app_log_level or "INFO").upper()
    resolved_level = logging.getLevelName(level_name)
    if not isinstance(resolved_level, int):
        resolved_level = logging.INFO

    logger = logging.getLogger("taskdesk")
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        _handler.addFilter(RequestContextFilter())
        logger.addHandler(_handler)
    logger.setLevel(resolved_level)
    return _handler
