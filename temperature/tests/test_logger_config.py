# file: temperature/tests/test_logger_config.py
import logging

from colorlog import ColoredFormatter

import logger_config
from logger_config import get_logger


def test_handler_installed_once():
    log = get_logger("test.once", level=logging.DEBUG)
    again = get_logger("test.once", level=logging.ERROR)
    assert log is again
    assert len(log.handlers) == 1
    assert isinstance(log.handlers[0].formatter, ColoredFormatter)
    assert log.level == logging.DEBUG


def test_default_level():
    assert logger_config.DEFAULT_LEVEL == logging.WARNING
    assert get_logger("test.level.default").level == logging.WARNING


def test_level_by_name():
    assert get_logger("test.level.name", level="INFO").level == logging.INFO


def test_environment_is_not_read(monkeypatch):
    monkeypatch.setenv("TEMPERATURE_LOG_LEVEL", "DEBUG")
    assert get_logger("test.level.env").level == logging.WARNING
