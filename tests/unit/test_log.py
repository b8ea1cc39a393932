import logging

from muid.log import log, setup_logging


def test_setup_logging_adds_one_handler(monkeypatch):
    monkeypatch.setenv("MUID_LOG_LEVEL", "debug")
    logger = setup_logging()
    setup_logging()
    assert logger.name == "muid"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("MUID_LOG_LEVEL", "DEBUG")
    assert setup_logging("error").level == logging.ERROR


def test_log_appends_context(caplog):
    logger = logging.getLogger("muid.test")
    with caplog.at_level(logging.INFO, logger="muid.test"):
        log(logger, "info", "Mining complete", found=2, attempts=512)
    assert caplog.messages == ["Mining complete | found=2 attempts=512"]
