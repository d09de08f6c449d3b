"""Logger Factory Port - Interface for building a channel's logger."""
import logging
from typing import Protocol

from src.domain.entities import LogChannelConfig


class LoggerFactoryPort(Protocol):
    """
    Port interface for channel factories.

    A factory receives the resolved channel record and returns a logger
    with its handlers attached and its minimum level applied.
    Implementations could build:
    - CloudWatch Logs handlers (custom driver)
    - Stream handlers (stderr driver)
    """

    def __call__(self, config: LogChannelConfig) -> logging.Logger:
        """
        Build the logger for a channel.

        Args:
            config: The resolved channel record

        Returns:
            Logger ready to accept records
        """
        ...
