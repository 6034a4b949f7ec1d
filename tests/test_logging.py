"""Tests for logging setup."""

import logging

import pytest

from src.wp_export.utils.logging import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def test_package_logger_name():
    assert PACKAGE_LOGGER == "src.wp_export"


def test_module_records_reach_log_file(tmp_path, package_logger):
    log_file = tmp_path / "logs" / "export.log"
    setup_logging(level="DEBUG", log_file=log_file, use_rich=False)

    get_logger("src.wp_export.export.po_export").debug("collected 3 entries")
    for handler in package_logger.handlers:
        handler.flush()

    assert "collected 3 entries" in log_file.read_text(encoding="utf-8")
    assert package_logger.level == logging.DEBUG


def test_root_logger_untouched(package_logger):
    root = logging.getLogger()
    before = list(root.handlers)
    setup_logging(level="WARNING")
    assert root.handlers == before
    assert package_logger.propagate is False


def test_repeated_setup_replaces_handlers(tmp_path, package_logger):
    setup_logging(log_file=tmp_path / "a.log")
    setup_logging(log_file=tmp_path / "b.log")
    assert len(package_logger.handlers) == 2
