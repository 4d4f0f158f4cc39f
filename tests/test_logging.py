from __future__ import annotations

import json
import logging

from ocrs_parser.core.logging import RequestIdFilter, StructuredFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("ocrs", logging.WARNING, __file__, 10, "attempt_failed", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_emits_known_extras() -> None:
    record = _record(run_id="abc", attempt=2, error_count=3, unrelated="x")
    data = json.loads(StructuredFormatter().format(record))

    assert data["message"] == "attempt_failed"
    assert data["level"] == "WARNING"
    assert data["run_id"] == "abc"
    assert data["attempt"] == 2
    assert data["error_count"] == 3
    assert "unrelated" not in data


def test_request_id_filter_defaults_outside_requests() -> None:
    record = _record()
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"
