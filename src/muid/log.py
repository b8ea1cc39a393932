"""Logging setup shared by the muid modules."""

import logging
import os

from muid.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

ROOT_LOGGER = "muid"


def setup_logging(level: str = None) -> logging.Logger:
    """Attach a stream handler to the muid logger once, level from the environment."""
    logger = logging.getLogger(ROOT_LOGGER)

    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
