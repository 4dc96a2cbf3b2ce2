import logging

import pytest

from sz_mock import SzBadInputError, SzLogger, SzSdkError
from sz_mock import logging_config
from sz_mock.helper import build_id_messages, mask_sensitive, mask_sensitive_details, stringify
from sz_mock.logging_config import PANIC, TRACE


@pytest.mark.parametrize(
    "number, level",
    [
        (1, TRACE),
        (999, TRACE),
        (1000, logging.DEBUG),
        (2500, logging.INFO),
        (3001, logging.WARNING),
        (4999, logging.ERROR),
        (5000, logging.CRITICAL),
        (6000, PANIC),
    ],
)
def test_level_for_message_number(number, level):
    assert logging_config.level_for_message_number(number) == level


def test_coerce_level_uses_senzing_names_and_env(monkeypatch):
    """Ensure Senzing level names and the environment resolve to logging levels.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None
    """
    assert logging_config._coerce_level("WARN") == logging.WARNING
    assert logging_config._coerce_level("trace") == TRACE
    assert logging_config._coerce_level(logging.ERROR) == logging.ERROR
    assert logging_config._coerce_level("nonsense") == logging.INFO

    monkeypatch.setenv("SENZING_LOG_LEVEL", "FATAL")
    assert logging_config._coerce_level(None) == logging.CRITICAL


def test_level_names_registered():
    assert logging.getLevelName(TRACE) == "TRACE"
    assert logging.getLevelName(PANIC) == "PANIC"


def test_logger_gates_on_its_own_threshold(caplog):
    logger = SzLogger(6034, {1: "Enter add_record.", 2001: "Started."}, logging.getLogger("sz_mock.test"))

    with caplog.at_level(TRACE, logger="sz_mock"):
        logger.log(1, "CUSTOMERS")
        logger.log(2001)
        logger.set_log_level("TRACE")
        logger.log(1, "CUSTOMERS")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["SZSDK60342001: Started. []", "SZSDK60340001: Enter add_record. ['CUSTOMERS']"]
    assert caplog.records[1].message_id == "SZSDK60340001"
    assert caplog.records[1].details == ("CUSTOMERS",)


def test_logger_rejects_unknown_level():
    logger = SzLogger(6036, {})
    with pytest.raises(SzBadInputError):
        logger.set_log_level("VERBOSE")
    assert logger.get_log_level() == "INFO"
    assert SzLogger.is_valid_log_level_name("PANIC")


def test_logger_wraps_logging_failures():
    class BrokenLogger(logging.Logger):
        def handle(self, record):
            raise ValueError("handler exploded")

    logger = SzLogger(6036, {}, BrokenLogger("broken"), level_name="TRACE")
    with pytest.raises(SzSdkError) as excinfo:
        logger.log(3)
    assert excinfo.value.error_code == "SZSDK60360003"


def test_build_id_messages_covers_entry_and_exit():
    class Op:
        name = "get_stats"
        trace_entry = 49
        trace_exit = 50

    assert build_id_messages([Op()]) == {49: "Enter get_stats.", 50: "Exit get_stats."}


def test_stringify():
    assert stringify(None) == ""
    assert stringify(42) == "42"
    assert stringify(True) == "1"
    assert stringify("text") == "text"


def test_mask_sensitive_nested():
    masked = mask_sensitive({"db": {"password": "hunter2hunter2", "user": "sz"}, "tokens": ["abc"]})
    assert masked == {"db": {"password": "hun***er2", "user": "sz"}, "tokens": ["a***c"]}


def test_mask_sensitive_details_leaves_record_keys():
    details = {"settings": "{...long settings...}", "recordKeys": "{}", "apiToken": "abcdef"}
    masked = mask_sensitive_details("initialize", details)
    assert masked["settings"] == "{..***..}"
    assert masked["recordKeys"] == "{}"
    assert masked["apiToken"] == "a***f"
