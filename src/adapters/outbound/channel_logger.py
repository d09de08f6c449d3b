"""Shared helper for preparing a channel's stdlib logger."""
import logging

from src.domain.entities import LogChannelConfig

LOGGER_PREFIX = "log_channel"


def channel_logger(config: LogChannelConfig) -> logging.Logger:
    """Return the channel's logger with any previous handlers removed."""
    logger = logging.getLogger(f"{LOGGER_PREFIX}.{config.name}")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(config.level.numeric)
    logger.propagate = False
    return logger
