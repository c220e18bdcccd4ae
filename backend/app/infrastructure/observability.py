"""Structured Logging — one JSON object per log line, plus a readable dev format.

Invariants:
    - Every JSON line has timestamp, level, logger and message
    - Request/resource context (user_id, resource_type, resource_id, error_code, path,
      page_id) is copied from `extra=` when present and non-null
    - setup_logging is idempotent: calling it again replaces, never stacks, its handler

Design Decisions:
    - stdlib logging + a small Formatter: no logging dependency, uvicorn and SQLAlchemy
      records flow through the same handler
    - Non-ASCII kept as-is (ensure_ascii=False): page ids, titles and moods are Japanese/emoji
"""

import json
import logging
from datetime import datetime, timezone

CONTEXT_FIELDS = (
    "user_id", "resource_type", "resource_id", "error_code", "path", "page_id",
)

_HANDLER_NAME = "certstudy"
_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key)
            for key in CONTEXT_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install the application handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
        ))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
