"""Tests for the loguru sink setup."""

from app.core import logging as app_logging


def test_file_sink_writes_under_log_dir():
    app_logging.logger.info("logging smoke check")
    app_logging.logger.complete()
    assert (app_logging.LOG_DIR / "app.log").exists()
