from __future__ import annotations

import json
import logging

from candidate_registry.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_CANDIDATE_ID = 10
EXPECTED_LINE_NO = 7


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.candidate_id = EXPECTED_CANDIDATE_ID
    record.path = "data/candidates.tsv"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["candidate_id"] == EXPECTED_CANDIDATE_ID
    assert payload["path"] == "data/candidates.tsv"
    assert "lineno" not in payload


def test_json_formatter_keeps_nested_extra_under_its_own_key() -> None:
    record = _record()
    record.extra = {"line_no": EXPECTED_LINE_NO}

    payload = json.loads(_json_formatter(record))

    assert payload["extra"] == {"line_no": EXPECTED_LINE_NO}
    assert "line_no" not in payload


def test_configure_logging_installs_json_handler() -> None:
    configure_logging(level="debug", json_logs=True)
    root = logging.getLogger()
    try:
        assert root.level == logging.DEBUG
        assert any(isinstance(h.formatter, JsonFormatter) for h in root.handlers)
    finally:
        configure_logging(level="WARNING")


def test_configure_logging_without_force_keeps_existing_handlers() -> None:
    configure_logging(level="INFO")
    before = list(logging.getLogger().handlers)
    configure_logging(level="DEBUG", json_logs=True, force=False)
    assert logging.getLogger().handlers == before
