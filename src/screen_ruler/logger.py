"""Package logger for screen_ruler."""

import logging

LOGGER_NAME = "screen_ruler"

logger = logging.getLogger(LOGGER_NAME)

if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter("[%(name)s] %(levelname)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.setLevel(logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Child logger below the package logger, e.g. ``screen_ruler.geometry``."""
    return logger.getChild(name)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


__all__ = ["LOGGER_NAME", "logger", "get_logger", "set_debug"]
