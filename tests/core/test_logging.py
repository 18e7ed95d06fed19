import logging

import pytest

from complexity_cli.core.logging import (
    AnalysisLogFormatter,
    configure_logging,
    log_classification,
    log_context,
    log_warning,
    logged_operation,
    reset_logger,
)


def _record(**context) -> logging.LogRecord:
    record = logging.LogRecord("complexity_cli", logging.INFO, __file__, 1, "msg", None, None)
    for key, value in context.items():
        setattr(record, key, value)
    return record


def test_formatter_prefixes_context():
    formatter = AnalysisLogFormatter("%(message)s")
    assert formatter.format(_record(source="a.js", function="f")) == "[source=a.js, function=f] msg"
    assert formatter.format(_record(source="a.js", function=None)) == "[source=a.js] msg"
    assert formatter.format(_record()) == "msg"


def test_log_file_receives_context(tmp_path):
    log_file = tmp_path / "analysis.log"
    reset_logger()
    try:
        configure_logging(log_file=str(log_file))
        with log_context(source="sort.js"):
            log_classification("mergeSort", "O(n log n)", "recursive-divide-and-conquer")
            log_warning("outside function")
        log_warning("no context")
    finally:
        reset_logger()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("[source=sort.js, function=mergeSort] ")
    assert lines[0].endswith("mergeSort: O(n log n) via recursive-divide-and-conquer")
    assert lines[1].startswith("[source=sort.js] ")
    assert lines[2].startswith("20") and "no context" in lines[2]


def test_logged_operation_records_outcome(tmp_path):
    log_file = tmp_path / "ops.log"

    @logged_operation("render")
    def render():
        return 7

    @logged_operation("explode")
    def explode():
        raise ValueError("boom")

    reset_logger()
    try:
        configure_logging(log_file=str(log_file))
        with log_context(source="a.js"):
            assert render() == 7
        with pytest.raises(ValueError):
            explode()
    finally:
        reset_logger()

    text = log_file.read_text(encoding="utf-8")
    assert "[source=a.js]" in text and "Completed render in" in text
    assert "Failed explode after" in text and "boom" in text
