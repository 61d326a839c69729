"""Tests for configure_logging."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from linkres.utils import logger as logger_module
from linkres.utils.logger import configure_logging


@pytest.fixture
def clean_logger(monkeypatch):
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root = logging.getLogger("linkres")
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[len(handlers) :]:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_attaches_rotating_handler(tmp_path, clean_logger):
    configure_logging(tmp_path, "DEBUG")

    handlers = [h for h in clean_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert handlers[0].baseFilename == str(tmp_path / "linkres.log")
    assert handlers[0].maxBytes == 5 * 1024 * 1024
    assert clean_logger.level == logging.DEBUG


def test_configures_once(tmp_path, clean_logger):
    configure_logging(tmp_path)
    count = len(clean_logger.handlers)
    configure_logging(tmp_path / "other", "ERROR")
    assert len(clean_logger.handlers) == count
    assert clean_logger.level == logging.INFO


def test_home_from_env(tmp_path, monkeypatch, clean_logger):
    monkeypatch.setenv("LINKRES_HOME", str(tmp_path / "home"))
    configure_logging(level="WARN")
    assert (tmp_path / "home").is_dir()
    assert clean_logger.level == logging.WARNING


def test_module_loggers_write_to_file(tmp_path, clean_logger):
    configure_logging(tmp_path, "DEBUG")
    logging.getLogger("linkres.api.link.resolve").debug("resolving %s", "x")
    for handler in clean_logger.handlers:
        handler.flush()
    assert "resolving x" in (tmp_path / "linkres.log").read_text()
