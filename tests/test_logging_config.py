import logging

from electrophoresis.logging_config import LOG_LEVEL_ENV, resolve_level, setup_logging


def test_resolve_level():
    assert resolve_level(logging.DEBUG) == logging.DEBUG
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level(None) == logging.INFO
    assert resolve_level("nonsense") == logging.INFO


def test_setup_logging_reads_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    log_file = tmp_path / "run.log"

    logger = setup_logging(log_file=str(log_file))
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    # Re-initialising replaces the handlers instead of stacking them
    logger = setup_logging(level="ERROR")
    assert logger.level == logging.ERROR
    assert len(logger.handlers) == 1

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
