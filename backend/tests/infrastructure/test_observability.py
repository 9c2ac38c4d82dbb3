"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from pretalab_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "pretalab_api.test", logging.INFO, __file__, 1, "tarefa criada", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_base_and_extra_fields():
    out = json.loads(JSONFormatter().format(
        _record(resource="task", document_id="60c72b2f9f1b2c001f8e9a2b"),
    ))
    assert out["level"] == "INFO"
    assert out["logger"] == "pretalab_api.test"
    assert out["message"] == "tarefa criada"
    assert out["resource"] == "task"
    assert out["document_id"] == "60c72b2f9f1b2c001f8e9a2b"
    assert "timestamp" in out


def test_json_formatter_omits_absent_extras():
    out = json.loads(JSONFormatter().format(_record()))
    assert "provider" not in out


def test_setup_logging_is_idempotent():
    setup_logging("DEBUG", "json")
    setup_logging("DEBUG", "json")

    named = [h for h in logging.root.handlers if h.get_name() == "pretalab_api"]
    assert len(named) == 1
    assert isinstance(named[0].formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG

    logging.root.removeHandler(named[0])


def test_json_formatter_includes_error_fields():
    out = json.loads(JSONFormatter().format(
        _record(error_code="DATABASE_ERROR", category="database", severity="critical"),
    ))
    assert out["error_code"] == "DATABASE_ERROR"
    assert out["category"] == "database"
    assert out["severity"] == "critical"
