"""Tests for the standard logger adapter."""

import json
import logging

from spreadfs.adapters import StdLoggerAdapter


def test_fields_are_appended_as_json(caplog):
    logger = StdLoggerAdapter(name="spreadfs.test", level="DEBUG")
    caplog.set_level(logging.DEBUG, logger="spreadfs.test")

    logger.info("Cache root ready", path="/tmp/x", mode="0o755")

    [record] = caplog.records
    message, _, fields = record.getMessage().partition(" {")
    assert message == "Cache root ready"
    assert json.loads("{" + fields) == {"mode": "0o755", "path": "/tmp/x"}


def test_plain_message_without_fields(caplog):
    logger = StdLoggerAdapter(name="spreadfs.test", level="DEBUG")
    caplog.set_level(logging.DEBUG, logger="spreadfs.test")

    logger.warning("nothing else")

    assert caplog.records[0].getMessage() == "nothing else"
    assert caplog.records[0].levelno == logging.WARNING


def test_level_filters(caplog):
    logger = StdLoggerAdapter(name="spreadfs.quiet", level="WARNING")

    logger.debug("hidden")
    logger.error("shown")

    assert [r.getMessage() for r in caplog.records] == ["shown"]


def test_log_operation(caplog):
    logger = StdLoggerAdapter(name="spreadfs.test", level="INFO")
    caplog.set_level(logging.INFO, logger="spreadfs.test")

    logger.log_operation(op="reload", path="/tmp/x", durations={"total": 0.5}, count=3)

    assert caplog.records[0].getMessage().startswith("Operation: reload")
    assert '"count": 3' in caplog.text
