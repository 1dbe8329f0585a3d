import logging
from logging import handlers

import config
from log import configure_logger


def test_logger_named_after_script(tmp_path):
    logger = configure_logger(str(tmp_path / "runner.py"))
    assert logger.name == "runner"
    assert logger is logging.getLogger("runner")


def test_configure_logger_is_idempotent(tmp_path):
    first = configure_logger(str(tmp_path / "twice.py"))
    count = len(first.handlers)
    second = configure_logger(str(tmp_path / "twice.py"))
    assert first is second
    assert len(second.handlers) == count


def test_file_handler_only_with_log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "LOG_DIR", None)
    logger = configure_logger(str(tmp_path / "console_only.py"))
    assert not any(isinstance(h, handlers.RotatingFileHandler) for h in logger.handlers)

    monkeypatch.setattr(config, "LOG_DIR", str(tmp_path / "logs"))
    logger = configure_logger(str(tmp_path / "with_file.py"))
    file_handlers = [h for h in logger.handlers if isinstance(h, handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert (tmp_path / "logs" / "with_file.log").exists()
    for handler in file_handlers:
        logger.removeHandler(handler)
        handler.close()
