import json
import logging

from shamir_recovery.utils import JsonFormatter, configure_logging, get_logger


def test_configure_logging_honors_env_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG


def test_explicit_level_wins_over_env(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    configure_logging("error")
    assert logging.getLogger().level == logging.ERROR


def test_log_file_receives_records(tmp_path) -> None:
    log_file = tmp_path / "recover.log"
    configure_logging("INFO", log_file=str(log_file))
    get_logger("shamir_recovery.test").info("hello file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello file" in log_file.read_text()


def test_json_formatter_emits_json() -> None:
    record = logging.LogRecord("shamir_recovery", logging.WARNING, __file__, 1, "value %d", (5,), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["name"] == "shamir_recovery"
    assert payload["message"] == "value 5"
