"""
Test suite for logging configuration

Tests the JSON formatter, handler setup and structured action records.
"""

import json
import logging
import sys

import pytest

from banking_ledger.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_action
)


@pytest.fixture
def logger_name(request):
    """Unique logger name per test; handlers are closed afterwards"""
    name = f"banking_ledger_test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def make_record(message="hello", level=logging.INFO, **fields):
    record = logging.LogRecord("banking_ledger.test", level, __file__, 1, message, (), None)
    for key, value in fields.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSON log formatting"""

    def test_basic_fields(self):
        entry = json.loads(JSONFormatter().format(make_record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "hello"
        assert "timestamp" in entry
        assert "action" not in entry
        assert "extra" not in entry

    def test_structured_fields(self):
        record = make_record(
            action="transfer", resource="account:Alice",
            extra={"to_account": "Bob", "amount": 20.0}
        )

        entry = json.loads(JSONFormatter().format(record))

        assert entry["action"] == "transfer"
        assert entry["resource"] == "account:Alice"
        assert entry["extra"] == {"to_account": "Bob", "amount": 20.0}

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.LogRecord(
                "banking_ledger.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )

        entry = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in entry["exception"]


class TestSetupLogging:
    """Test logger setup"""

    def test_stream_handler_json(self, logger_name):
        logger = setup_logging("INFO", logger_name=logger_name)

        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_does_not_duplicate_handlers(self, logger_name):
        setup_logging("INFO", logger_name=logger_name)
        logger = setup_logging("DEBUG", logger_name=logger_name)

        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_text_format_to_file(self, logger_name, tmp_path):
        log_file = tmp_path / "ledger.log"
        logger = setup_logging("INFO", logger_name=logger_name,
                               log_format="text", log_file=str(log_file))

        logger.info("Account created")
        logger.handlers[0].flush()

        contents = log_file.read_text(encoding="utf-8")
        assert "INFO" in contents
        assert "Account created" in contents
        assert not contents.lstrip().startswith("{")

    def test_get_logger(self):
        assert get_logger("banking_ledger.ledger") is logging.getLogger("banking_ledger.ledger")


class TestLogAction:
    """Test structured action logging"""

    def test_log_action_attaches_fields(self, logger_name, tmp_path):
        log_file = tmp_path / "actions.log"
        logger = setup_logging("INFO", logger_name=logger_name, log_file=str(log_file))

        log_action(logger, "info", "Transfer completed", action="transfer",
                   resource="account:Alice", extra={"amount": 20.0})
        logger.handlers[0].flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").strip())
        assert entry["message"] == "Transfer completed"
        assert entry["action"] == "transfer"
        assert entry["resource"] == "account:Alice"
        assert entry["extra"] == {"amount": 20.0}

    def test_log_action_respects_level(self, logger_name, tmp_path):
        log_file = tmp_path / "quiet.log"
        logger = setup_logging("WARNING", logger_name=logger_name, log_file=str(log_file))

        log_action(logger, "info", "Account created", action="create_account")
        log_action(logger, "warning", "Transfer rejected", action="transfer")
        logger.handlers[0].flush()

        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["action"] == "transfer"
