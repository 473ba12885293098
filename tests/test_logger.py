"""Tests for localdisk logging setup."""
import logging

import pytest
from rich.logging import RichHandler

from localdisk.core import logger as logger_module
from localdisk.core.logger import get_logger, set_verbose, setup_file_logging


@pytest.fixture
def fresh_file_logging(monkeypatch):
    """Allow setup_file_logging to run again and drop handlers it adds."""
    monkeypatch.setattr(logger_module, "_file_logging_configured", False)
    root = logging.getLogger("localdisk")
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_loggers_share_package_root():
    log = get_logger("localdisk.discovery.sources")
    assert log.name == "localdisk.discovery.sources"
    assert get_logger("elsewhere").name == "localdisk.elsewhere"


def test_single_console_handler():
    get_logger("localdisk.a")
    get_logger("localdisk.b")
    root = logging.getLogger("localdisk")
    rich_handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1


def test_set_verbose(fresh_file_logging):
    set_verbose(True)
    assert logging.getLogger("localdisk").level == logging.DEBUG
    set_verbose(False)
    assert logging.getLogger("localdisk").level == logging.INFO


def test_file_logging(tmp_path, fresh_file_logging):
    log_file = tmp_path / "logs" / "localdisk.log"
    path = setup_file_logging(str(log_file), verbose=True)

    get_logger("localdisk.test").debug("serial number unavailable for /dev/sda")
    for handler in logging.getLogger("localdisk").handlers:
        handler.flush()

    assert path == log_file
    content = log_file.read_text()
    assert "localdisk.test | DEBUG | serial number unavailable for /dev/sda" in content


def test_file_logging_configured_once(tmp_path, fresh_file_logging):
    setup_file_logging(str(tmp_path / "one.log"))
    count = len(logging.getLogger("localdisk").handlers)
    setup_file_logging(str(tmp_path / "two.log"))

    assert len(logging.getLogger("localdisk").handlers) == count
    assert not (tmp_path / "two.log").exists()


def test_unwritable_log_file_falls_back(tmp_path, monkeypatch, fresh_file_logging):
    fallback = tmp_path / "fallback" / "localdisk.log"
    monkeypatch.setattr(logger_module, "FALLBACK_LOG_FILE", fallback)
    # An existing directory cannot be opened as a log file
    blocked = tmp_path / "blocked"
    blocked.mkdir()

    path = setup_file_logging(str(blocked), verbose=True)

    assert path == fallback
    assert fallback.exists()
