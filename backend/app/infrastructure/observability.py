"""Structured Logging — one JSON object per line for the API and the migration CLI.

Invariants:
    - Every line carries timestamp (record creation time, UTC), level, logger, message
    - Only whitelisted extras are emitted; None values are omitted
    - setup_logging is idempotent: re-running it swaps our handler, never stacks one

Extras by origin:
    - collection, document_id: document_store and the MaagError handler
    - reset_count: exclusive-flag resets on article/event writes
    - updated_count: rows rewritten by the news-category migration
    - event_type, event_id, user_id: Stripe webhook sync and checkout
    - error_code, path: error handlers
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_FIELDS = (
    "collection", "document_id", "reset_count", "updated_count",
    "event_type", "event_id", "user_id", "error_code", "path",
)
_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """Render a record and its known extras as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update({
            key: record.__dict__[key] for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        })
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def build_handler(fmt: str = "json") -> logging.Handler:
    """stderr handler; "json" for deployments, anything else for a terminal."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    handler.set_name("maag")
    return handler


def setup_logging(level: str = "INFO", fmt: str = "json"):
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == "maag"]:
        root.removeHandler(existing)
    root.addHandler(build_handler(fmt))
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
