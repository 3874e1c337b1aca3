"""Structured Logging — JSON formatter output."""

import json
import logging

from task_api.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "task_api.test", logging.INFO, __file__, 1, "Task created", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "task_api.test"
    assert payload["message"] == "Task created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(_record(task_id=5, secret="x")))
    assert payload["task_id"] == 5
    assert "secret" not in payload
