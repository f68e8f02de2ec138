import logging
import sys

import pytest
from clickup_mcp.core.logging import LogfmtFormatter, resolve_level, setup_logging
from clickup_mcp.core.observability import log_event


def _record(msg="clickup.request", **extra):
    record = logging.LogRecord(
        name="clickup_mcp.client",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_formats_known_extras():
    line = LogfmtFormatter().format(
        _record(tool="tasks", method="GET", status=200, duration_ms=12, ignored="x")
    )

    assert "level=info" in line
    assert "logger=clickup_mcp.client" in line
    assert "event=clickup.request" in line
    assert "tool=tasks" in line
    assert "status=200" in line
    assert "duration_ms=12" in line
    assert "ignored" not in line


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(
        _record(msg="Rate limit exceeded", url='https://x/?a="b"')
    )

    assert 'event="Rate limit exceeded"' in line
    assert 'url="https://x/?a=\\"b\\""' in line


def test_logfmt_reports_exception_type():
    try:
        raise KeyError("boom")
    except KeyError:
        record = _record()
        record.exc_info = sys.exc_info()

    assert "exc_type=KeyError" in LogfmtFormatter().format(record)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("error", logging.ERROR),
        ("warn", logging.WARNING),
        ("WARNING", logging.WARNING),
        (" debug ", logging.DEBUG),
        ("verbose", logging.INFO),
        ("", logging.INFO),
    ],
)
def test_resolve_level(level, expected):
    assert resolve_level(level) == expected


def test_setup_logging_writes_logfmt_to_stderr():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("warn")
        setup_logging("warn")

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert isinstance(handler.formatter, LogfmtFormatter)
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)


def test_log_event_drops_reserved_keys(caplog):
    caplog.set_level(logging.INFO, logger="clickup_mcp.observability")

    log_event("tool_call", tool="clickup_get_task", status="ok", name="clash", duration_ms=3)

    record = next(r for r in caplog.records if r.getMessage() == "tool_call")
    assert record.tool == "clickup_get_task"
    assert record.status == "ok"
    assert record.duration_ms == 3
    assert record.name == "clickup_mcp.observability"


def test_log_event_custom_logger_and_level(caplog):
    logger = logging.getLogger("clickup_mcp.test")
    caplog.set_level(logging.DEBUG, logger="clickup_mcp.test")

    log_event("debug_event", logger, level=logging.DEBUG, tool="x")

    record = next(r for r in caplog.records if r.getMessage() == "debug_event")
    assert record.levelno == logging.DEBUG
    assert record.name == "clickup_mcp.test"
