"""Structured Logging — JSON lines and handler setup.

Tests:
    - Whitelisted extras surface, unknown and None extras do not
    - Exceptions are rendered into the line
    - setup_logging can run twice without stacking handlers
"""

import json
import logging
import sys

from app.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg="News migration done", exc_info=None, **extra):
    record = logging.LogRecord(
        "app.services.news_migration", logging.INFO, __file__, 1,
        msg, None, exc_info,
    )
    record.__dict__.update(extra)
    return record


def test_json_line_carries_known_extras():
    line = JSONFormatter().format(_record(
        collection="articles", updated_count=2, document_id=None, secret="x",
    ))
    body = json.loads(line)
    assert body["message"] == "News migration done"
    assert body["level"] == "INFO"
    assert body["collection"] == "articles"
    assert body["updated_count"] == 2
    assert "document_id" not in body
    assert "secret" not in body


def test_json_line_keeps_cyrillic_and_exceptions():
    try:
        raise ValueError("плохие данные")
    except ValueError:
        record = _record("Ошибка", exc_info=sys.exc_info())
    line = JSONFormatter().format(record)
    assert "Ошибка" in line
    assert "плохие данные" in json.loads(line)["exception"]


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    level = root.level
    try:
        setup_logging("DEBUG", "text")
        setup_logging("WARNING", "json")
        ours = [h for h in root.handlers if h.get_name() == "maag"]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        for handler in [h for h in root.handlers if h.get_name() == "maag"]:
            root.removeHandler(handler)
        root.setLevel(level)
