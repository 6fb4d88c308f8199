"""Тесты конфигурации логирования."""

import json
import logging

from bookhub.logging_config import ColoredFormatter, JSONFormatter, setup_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("bookhub.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra():
    payload = json.loads(JSONFormatter().format(_record(user_id=7)))

    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "bookhub.test"
    assert payload["user_id"] == 7
    assert "msg" not in payload


def test_colored_formatter_does_not_mutate_record():
    record = _record()
    output = ColoredFormatter("%(levelname)s %(message)s").format(record)

    assert "\033[32m" in output
    assert record.levelname == "INFO"


def test_setup_logging_writes_json_file(tmp_path):
    log_file = tmp_path / "bookhub.log"
    setup_logging(level="DEBUG", log_file=str(log_file))
    logger = logging.getLogger("bookhub")
    try:
        logging.getLogger("bookhub.session").info("Session cleared")
        for handler in logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["message"] == "Session cleared"
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []
        logger.setLevel(logging.NOTSET)
