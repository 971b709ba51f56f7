"""
Logging Configuration Tests

To run:
    pytest tests/core/test_logging_config.py -v
"""

import logging
import logging.handlers

import pytest

from core.logging_config import setup_logging


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after each test"""
    logger = logging.getLogger()
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


def added_file_handlers(logger):
    return [
        h for h in logger.handlers
        if isinstance(h, logging.handlers.TimedRotatingFileHandler)
    ]


@pytest.mark.unit
def test_logs_to_requested_file(root_logger, tmp_path):
    log_file = tmp_path / "reachability.log"

    setup_logging(level="INFO", log_file=log_file, console=False)
    logging.getLogger("reachability.test").info("hello")

    handlers = added_file_handlers(root_logger)
    assert len(handlers) == 1
    handlers[0].flush()
    assert "hello | reachability.test" in log_file.read_text()


@pytest.mark.unit
def test_falls_back_to_local_logs_dir(root_logger, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    setup_logging(
        level="DEBUG",
        log_file=tmp_path / "missing" / "reachability.log",
        console=False,
    )

    assert (tmp_path / "logs" / "reachability.log").exists()
    assert root_logger.level == logging.DEBUG
