"""Logging setup for the proxy.

``setup_logging`` is called once by the API lifespan and by the CLI.  It
installs a single stream handler on the root logger; calling it again swaps
the formatter and rebinds the handler to the current ``sys.stderr`` instead
of stacking handlers.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

# Extra fields surfaced by JSONFormatter when a log call passes them.
_CONTEXT_KEYS = ("endpoint", "article_id", "email", "status_code", "path", "error_code")

_HANDLER_NAME = "cmsproxy"


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _CONTEXT_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """Configure the root logger with a text or JSON handler."""
    handler = next(
        (h for h in logging.root.handlers if h.get_name() == _HANDLER_NAME), None
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        logging.root.addHandler(handler)
    else:
        handler.stream = sys.stderr

    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
